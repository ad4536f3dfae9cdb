"""
Exception types raised by the constrained alignment package.
"""


class AlignmentError(Exception): pass
class ScoringError(AlignmentError): pass
class SequenceTooLargeError(AlignmentError): pass
class ConfigError(Exception): pass


__all__ = [
    'AlignmentError',
    'ScoringError',
    'SequenceTooLargeError',
    'ConfigError',
]
