"""Service-level failures and the HTTP status each one maps to.

Malformed input is reported with django.core.exceptions.ValidationError (400);
the classes here cover the rest of the taxonomy.
"""


class ServiceError(Exception):
	status_code = 500
	default_message = "Internal server error"

	def __init__(self, message: str | None = None):
		self.message = message or self.default_message
		super().__init__(self.message)


class NotFound(ServiceError):
	"""A referenced wallet, transaction or singleton row does not exist"""
	status_code = 404
	default_message = "Not found"


class Conflict(ServiceError):
	"""Uniqueness violation (wallet address, transaction id)"""
	status_code = 409
	default_message = "Already exists"


class InternalError(ServiceError):
	pass
