"""Qt UI components for the quiz application."""
