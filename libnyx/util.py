# -*- coding: utf-8 -*-
"""
# nyx TOTP library
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libnyx.exception import NyxError

from base64 import b32decode
import binascii
import getpass
import os

__all__ = [
	"envFlag",
	"decodeBase32Secret",
	"readSecret",
]

def envFlag(name):
	"""Returns True, if the environment variable name is set to a true value.
	"""
	return os.getenv(name, "").lower().strip() in ("1", "true", "yes", "on")

def decodeBase32Secret(secret):
	"""Decode a base32 encoded secret string into raw key bytes.
	Whitespace is ignored and missing padding is added.
	"""
	secret = "".join(secret.split()).upper()
	secret += "=" * (-len(secret) % 8)
	try:
		key = b32decode(secret.encode("UTF-8"), casefold=True)
	except (binascii.Error, UnicodeError):
		raise NyxError("Invalid base32 secret.")
	if not key:
		raise NyxError("The secret is empty.")
	return key

def readSecret(prompt):
	"""Interactively read the secret.
	Returns None, if nothing was entered or the user aborted.
	"""
	readFunc = input if envFlag("NYX_RAWGETPASS") else getpass.getpass
	try:
		return readFunc(prompt + ": ") or None
	except (EOFError, KeyboardInterrupt):
		print("")
		return None
