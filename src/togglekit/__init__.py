"""
togglekit – feature state repositories and declarative feature metadata.

Import path convention::

    from togglekit.features import FeatureGroup, FeatureState, declare
    from togglekit.repository import InMemoryStateRepository, LoggingStateRepository
    from togglekit.metadata import Label, Owner, get_label
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
