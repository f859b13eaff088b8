highlight_template = """You are an expert video editor. Analyze this transcript and find the 3-5 best clip moments.

Look for:
- Exciting or funny moments
- Important statements
- Emotional peaks
- Surprising twists
- Quotable moments (quotes that could go viral)

Transcript:
{transcript}

Answer ONLY in JSON format:
[
  {{
    "start": 0,
    "end": 30,
    "title": "Short clip title",
    "reason": "Why this is interesting",
    "score": 95
  }}
]

Rules:
- start/end in seconds (integers)
- Clips should be 15-60 seconds long
- score from 1-100 (how good the clip is)
- At most 5 clips
- ONLY valid JSON, no other text"""
