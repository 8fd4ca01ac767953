'''
Errors Module

Exceptions raised by the ingestion, fitting, and prediction steps.
'''


class PythagoreanError(ValueError):
    '''Base class for all package errors'''


class MalformedRecord(PythagoreanError):
    '''
    A raw game log entry could not be normalized

    Raised per entry. The caller decides whether to skip the entry or abort the batch.
    '''
    def __init__(self, message: str, entry=None):
        super().__init__(message)
        self.entry = entry


class InsufficientData(PythagoreanError):
    '''
    Not enough usable team-seasons to fit an exponent

    Fatal to the fit. No default exponent is substituted.
    '''


class UndefinedPrediction(PythagoreanError):
    '''
    A team-season has zero runs scored and zero runs allowed

    Fatal to that single prediction only.
    '''
