# =============================================================================
# VIDEO ANALYSIS PROMPT
# =============================================================================


def video_analysis(video_info: str) -> str:
    """Analysis prompt for a video known only by its file name or URL."""
    return f"""Analyze this video: "{video_info}"

Please provide:
1. A concise summary (3-4 sentences)
2. 5 key points from the video
3. The overall sentiment (positive, negative, or neutral with explanation)
4. Main topics discussed (as a list of keywords)

Format your response as JSON with the following structure:
{{
  "summary": "...",
  "keyPoints": ["point1", "point2", "point3", "point4", "point5"],
  "sentiment": "...",
  "topics": ["topic1", "topic2", "..."]
}}"""
