from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

_analyzer = SentimentIntensityAnalyzer()

def compound_score(text: str) -> float:
    """VADER compound polarity in [-1, 1]; 0.0 for empty or non-text input."""
    if not isinstance(text, str) or not text.strip():
        return 0.0
    return round(float(_analyzer.polarity_scores(text)['compound']), 4)
