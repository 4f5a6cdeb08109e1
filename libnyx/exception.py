# -*- coding: utf-8 -*-
"""
# nyx TOTP library
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"NyxError",
	"OtpError",
	"InvalidTimeStep",
	"InvalidDigits",
	"NegativeTime",
]

class NyxError(Exception):
	"""Main nyx exception.
	"""

class OtpError(NyxError):
	"""HOTP/TOTP exception.
	"""

class InvalidTimeStep(OtpError):
	"""The TOTP time step is not a positive integer.
	"""

class InvalidDigits(OtpError):
	"""The number of OTP digits is out of range.
	"""

class NegativeTime(OtpError):
	"""The TOTP time is before the Unix epoch.
	"""
