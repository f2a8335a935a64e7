"""bookcast - Turn a directory of audio files into a podcast RSS feed."""

__version__ = "0.1.0"
