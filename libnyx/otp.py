# -*- coding: utf-8 -*-
"""
# HOTP/TOTP support
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libnyx.backend import HmacSha1Backend
from libnyx.exception import *

import hmac
import math
import time

__all__ = [
	"DEFAULT_DIGITS",
	"DEFAULT_TIME_STEP",
	"DEFAULT_SKEW",
	"hotpTruncate",
	"hotpFormat",
	"hotpInt",
	"hotp",
	"totpCounter",
	"totpInt",
	"totp",
	"totpVerify",
	"generate",
	"verify",
]

DEFAULT_DIGITS		= 6
DEFAULT_TIME_STEP	= 30
DEFAULT_SKEW		= 1

MIN_DIGITS		= 1
MAX_DIGITS		= 9
MAX_COUNTER		= (2 ** 64) - 1

def _checkDigits(nrDigits):
	if (not isinstance(nrDigits, int) or
	    isinstance(nrDigits, bool) or
	    not (MIN_DIGITS <= nrDigits <= MAX_DIGITS)):
		raise InvalidDigits("Invalid number of digits. "
				    "Must be %d to %d." % (MIN_DIGITS, MAX_DIGITS))

def hotpTruncate(digest, nrDigits=DEFAULT_DIGITS):
	"""RFC 4226 dynamic truncation.
	digest: The 20 byte HMAC-SHA1 digest.
	nrDigits: The number of decimal digits. Can be 1 to 9.
	Returns the code integer in the range [0, 10 ** nrDigits).
	"""
	_checkDigits(nrDigits)
	if len(digest) != HmacSha1Backend.DIGEST_SIZE:
		raise OtpError("Invalid HMAC digest length.")
	offset = digest[19] & 0xF
	binCode = int.from_bytes(digest[offset:offset+4],
				 byteorder="big", signed=False)
	binCode &= 0x7FFFFFFF
	return binCode % (10 ** nrDigits)

def hotpFormat(code, nrDigits=DEFAULT_DIGITS):
	"""Format a truncated code as zero padded decimal string.
	"""
	_checkDigits(nrDigits)
	return "%0*d" % (nrDigits, code)

def _keyBytes(key):
	if isinstance(key, str):
		return key.encode("UTF-8")
	if not isinstance(key, (bytes, bytearray, memoryview)):
		raise OtpError("Invalid key. Must be bytes or str.")
	return key

def hotpInt(key, counter, nrDigits=DEFAULT_DIGITS):
	"""HOTP as integer.
	See hotp().
	"""
	key = _keyBytes(key)
	if (not isinstance(counter, int) or
	    isinstance(counter, bool) or
	    not (0 <= counter <= MAX_COUNTER)):
		raise OtpError("Invalid counter.")
	_checkDigits(nrDigits)
	counter = counter.to_bytes(length=8, byteorder="big", signed=False)
	digest = HmacSha1Backend.get().hmacSha1(key, counter)
	return hotpTruncate(digest, nrDigits)

def hotp(key, counter, nrDigits=DEFAULT_DIGITS):
	"""HOTP - An HMAC-Based One-Time Password Algorithm.
	key: The raw HOTP key bytes. A str key is UTF-8 encoded.
	counter: The HOTP counter integer.
	nrDigits: The number of digits to return. Can be 1 to 9.
	Returns the calculated HOTP token string.
	"""
	return hotpFormat(hotpInt(key, counter, nrDigits), nrDigits)

def totpCounter(t=None, timeStep=DEFAULT_TIME_STEP):
	"""Calculate the TOTP moving factor.
	t: The Unix time in seconds. Uses time.time(), if not given.
	timeStep: The time step in seconds.
	Returns the HOTP counter integer.
	"""
	if (not isinstance(timeStep, int) or
	    isinstance(timeStep, bool) or
	    timeStep <= 0):
		raise InvalidTimeStep("Invalid time step. Must be a positive integer.")
	if t is None:
		t = time.time()
	if t < 0:
		raise NegativeTime("Invalid time. Must not be negative.")
	if isinstance(t, float) and not math.isfinite(t):
		raise OtpError("Invalid time. Must be finite.")
	counter = int(t // timeStep)
	if counter > MAX_COUNTER:
		raise OtpError("Invalid time. Counter overflow.")
	return counter

def totpInt(key, t=None, timeStep=DEFAULT_TIME_STEP, nrDigits=DEFAULT_DIGITS):
	"""TOTP as integer.
	See totp().
	"""
	return hotpInt(key, totpCounter(t, timeStep), nrDigits)

def totp(key, t=None, timeStep=DEFAULT_TIME_STEP, nrDigits=DEFAULT_DIGITS):
	"""TOTP - Time-Based One-Time Password Algorithm.
	key: The raw TOTP key bytes. A str key is UTF-8 encoded.
	t: Optional; the time in seconds. Uses time.time(), if not given.
	timeStep: The time step in seconds.
	nrDigits: The number of digits to return. Can be 1 to 9.
	Returns the calculated TOTP token string.
	"""
	return hotpFormat(totpInt(key, t, timeStep, nrDigits), nrDigits)

def totpVerify(key, token, t=None, timeStep=DEFAULT_TIME_STEP,
	       nrDigits=DEFAULT_DIGITS, skew=DEFAULT_SKEW):
	"""Check a TOTP token.
	token: The token string or integer.
	skew: The number of time steps to accept before and after t.
	Returns True, if the token matches one of the time steps.
	"""
	if not isinstance(skew, int) or isinstance(skew, bool) or skew < 0:
		raise OtpError("Invalid skew.")
	_checkDigits(nrDigits)
	key = _keyBytes(key)
	counter = totpCounter(t, timeStep)
	if isinstance(token, int) and not isinstance(token, bool):
		if not (0 <= token < 10 ** nrDigits):
			return False
		token = hotpFormat(token, nrDigits)
	elif not isinstance(token, str):
		raise OtpError("Invalid token type.")
	token = token.strip()
	if (len(token) != nrDigits or
	    not token.isascii() or
	    not token.isdigit()):
		return False
	token = token.encode("ASCII")

	match = False
	for c in range(max(counter - skew, 0),
		       min(counter + skew, MAX_COUNTER) + 1):
		expected = hotp(key, c, nrDigits).encode("ASCII")
		# Do not break early. Check the whole window.
		match |= hmac.compare_digest(expected, token)
	return match

def generate(secret, unixTime, timeStep=DEFAULT_TIME_STEP, digits=DEFAULT_DIGITS):
	"""Generate the TOTP token string for the Unix time unixTime.
	"""
	if unixTime is None:
		raise OtpError("Invalid time.")
	return totp(secret, unixTime, timeStep, digits)

def verify(secret, unixTime, token, timeStep=DEFAULT_TIME_STEP,
	   digits=DEFAULT_DIGITS, skew=DEFAULT_SKEW):
	"""Check the TOTP token for the Unix time unixTime.
	"""
	if unixTime is None:
		raise OtpError("Invalid time.")
	return totpVerify(secret, token, unixTime, timeStep, digits, skew)
