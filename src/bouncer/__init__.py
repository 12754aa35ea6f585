"""
bouncer: nightclub door policy built on the verdict validation combinators.

Checks a person against a club's house rules (age, dress code, sobriety,
gender) using either fail-fast sequencing, which reports the first refusal,
or accumulating composition, which reports every refusal at once.
"""

__version__ = "0.1.0"
