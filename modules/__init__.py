"""Infrastructure shared by the assistant, its tools and scorers."""
