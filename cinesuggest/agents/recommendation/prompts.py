"""
Movie Recommendation Prompt Templates

Contains the system prompt and user prompt builder for the Recommendation Service.

Architecture:
- Pattern: Single-shot LLM (one API call, no tools)
- Model: Gemini 2.5 Flash (configurable via GEMINI_MODEL)
- Temperature: 0.7 (some variety between runs is welcome)
- Output: Structured JSON (via response_schema with Pydantic)

Prompt Engineering Pattern:
- XML tags delimit the user's free text from the instructions
- System prompt defines the role only
- User prompt carries the task, constraints and output schema
"""

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

MOVIE_RECOMMENDATION_SYSTEM_PROMPT = """You are CineSuggest, a movie curator with deep knowledge of world cinema.

<role>
You recommend films to people based on movies they already love. You know
mainstream and independent cinema from every country and decade, and you are
especially good at surfacing films from outside Hollywood that match a
viewer's taste.
</role>

<principles>
- Recommend REAL, released movies only. Never invent titles.
- Do not recommend a movie the user already listed.
- Explain each pick in terms of what the user seems to enjoy.
- Prefer variety: different countries, decades and directors.
</principles>

<limitations>
- You do not know the user's viewing history beyond what they typed
- Availability on streaming services is out of scope
</limitations>"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def build_movie_recommendation_prompt(user_input: str, count: int = 6) -> str:
    """
    Build the user prompt for the Recommendation Service.

    The user's text is embedded verbatim between <liked_movies> tags.

    Args:
        user_input: Free-text list of movies the user likes
        count: Number of recommendations to ask for

    Returns:
        str: Formatted user prompt ready to be sent to Gemini
    """
    return f"""Recommend movies for a viewer who told us what they like.

<liked_movies>
{user_input}
</liked_movies>

<instructions>
1. Identify the titles, genres, moods and themes in liked_movies.
   The text may be a comma separated list, one title per line, or a sentence.
2. Recommend exactly {count} different movies the viewer has not listed.
3. Include films from several countries when they fit the viewer's taste.
4. For each movie give a one or two sentence synopsis and a short reason
   that connects it to the liked movies.
</instructions>

<output_schema>
Return ONLY valid JSON with this exact structure. No markdown, no prose.

{{
  "recommendations": [
    {{
      "title": string,
      "year": number,
      "country": string,
      "genre": string,
      "description": string,
      "reason": string
    }}
  ]
}}
</output_schema>"""
