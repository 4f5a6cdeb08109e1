# -*- coding: utf-8 -*-
"""
# HMAC-SHA1 backend wrapper
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libnyx.exception import NyxError
from libnyx.util import envFlag

import os
import sys

__all__ = [
	"HmacSha1Backend",
]

class HmacSha1Backend:
	"""Abstraction layer for the HMAC-SHA1 implementation.
	"""

	DIGEST_SIZE = 160 // 8
	__singleton = None
	DEBUG = False

	@classmethod
	def get(cls):
		"""Get the HMAC-SHA1 backend singleton.
		"""
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	@classmethod
	def reset(cls):
		"""Drop the singleton, so that the next get()
		evaluates NYX_CRYPTOLIB again.
		"""
		cls.__singleton = None

	def __init__(self):
		self.__builtin = None
		self.__cryptodome = None

		cryptolib = os.getenv("NYX_CRYPTOLIB", "").lower().strip()

		if cryptolib in ("", "builtin"):
			import libnyx.hmac_sha1
			self.__builtin = libnyx.hmac_sha1
			self.__debug("builtin")
			return

		if cryptolib in ("cryptodome", "pycryptodomex"):
			try:
				import Cryptodome
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				self.__cryptodome = Cryptodome
				self.__debug("cryptodome")
				return
			except ImportError as e:
				raise NyxError("Python module import error.\n"
					       "'NYX_CRYPTOLIB=%s' is selected, but "
					       "'Cryptodome' is not installed: %s" % (
					       cryptolib, str(e)))

		raise NyxError("'NYX_CRYPTOLIB=%s' is not supported." % cryptolib)

	@property
	def name(self):
		if self.__cryptodome is not None:
			return "cryptodome"
		return "builtin"

	def __debug(self, name):
		if self.DEBUG or envFlag("NYX_DEBUG"):
			print("nyx: Using the %s HMAC-SHA1 backend." % name,
			      file=sys.stderr)

	def hmacSha1(self, key, message):
		"""Calculate the HMAC-SHA1 of message with key.
		Returns the 20 byte MAC.
		"""
		try:
			if self.__builtin is not None:
				mac = self.__builtin.hmacSha1(key, message)
			else:
				Hash = self.__cryptodome.Hash
				mac = Hash.HMAC.new(key=bytes(key),
						    msg=bytes(message),
						    digestmod=Hash.SHA1).digest()
		except Exception as e:
			raise NyxError("HMAC-SHA1 error: %s: %s" % (type(e), str(e)))
		if len(mac) != self.DIGEST_SIZE:
			raise NyxError("HMAC-SHA1: Invalid digest length.")
		return mac

	@classmethod
	def quickSelfTest(cls):
		"""Run a quick algorithm self test (RFC 6238, T = 59).
		"""
		inst = cls.get()
		mac = inst.hmacSha1(key=b"12345678901234567890",
				    message=(1).to_bytes(length=8, byteorder="big"))
		if mac != bytes.fromhex("75a48a19d4cbe100644e8ac1397eea747a2d33ab"):
			raise NyxError("HMAC-SHA1 (%s): Quick self test failed." % inst.name)
