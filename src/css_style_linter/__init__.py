"""Style-conformance linter for CSS and SCSS."""

__version__ = "0.1.0"
