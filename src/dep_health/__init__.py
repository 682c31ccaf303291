from .app.main import audit_manifest, audit_file, audit_github, score_package

__all__ = [
    "audit_manifest",
    "audit_file",
    "audit_github",
    "score_package",
]

__version__ = "0.1.0"

# stdlib logging defaults: attach NullHandler to prevent 'No handler' warnings
import logging
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
