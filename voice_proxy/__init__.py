"""Voice synthesis proxy for an RVC server and Gemini TTS."""

__version__ = "0.1.0"
