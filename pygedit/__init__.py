"""PyGedit: a small PyQt6 plain-text editor."""
