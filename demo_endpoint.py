"""
Quick demo script to run the CineSuggest server locally.

Requires GOOGLE_API_KEY in the environment or a .env file.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting CineSuggest AI Demo")
    print("=" * 60)
    print()
    print("📌 Endpoints:")
    print("   - Web page:        GET  http://localhost:8000/")
    print("   - Recommendations: POST http://localhost:8000/recommendations/query")
    print("   - Health Check:    GET  http://localhost:8000/health")
    print("   - API Docs:             http://localhost:8000/docs")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations/query" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"user_input": "Parasite, Inception"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "cinesuggest.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
