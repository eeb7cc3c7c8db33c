"""
Domain records held by the repositories.

Models are plain dataclasses and carry no HTTP or validation concerns;
the API representation lives in ``schemas``.
"""
