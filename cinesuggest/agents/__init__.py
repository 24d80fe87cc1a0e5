"""
LLM agent prompts for the CineSuggest backend.

Agents here are single-shot prompt definitions; the calls themselves are made
by the service layer.
"""
