"""Form mailer: career and contact form submissions delivered by email."""

__version__ = "1.0.0"
