"""Infrastructure: store access (SQLAlchemy) and telemetry wiring."""
