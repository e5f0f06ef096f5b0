class HandinsError(Exception):
    default_message = 'handins error'

    def __init__(self, message=None):
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class EmptyCandidateSet(HandinsError):
    default_message = 'There are no ungraded assignments to choose from.'


class UndefinedProjection(HandinsError):
    default_message = 'No assignments have been graded yet, so a current grade cannot be computed.'


class NoMatch(HandinsError):
    default_message = 'No ungraded assignment matches that name.'


class UserAborted(HandinsError):
    default_message = 'Submission cancelled.'


class MalformedInput(HandinsError):
    default_message = 'Please answer y or n.'


class ExhaustedCandidates(HandinsError):
    default_message = 'No matching assignment accepted.'


class UnknownCourse(HandinsError):
    default_message = 'Course not found.'


class PortalError(HandinsError):
    default_message = 'Could not communicate with the handins server.'


class CredentialsError(HandinsError):
    default_message = 'No credentials provided.'
