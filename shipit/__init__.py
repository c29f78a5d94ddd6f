"""shipit: build, push and roll out a container image to Cloud Run services."""

__version__ = "0.3.0"
