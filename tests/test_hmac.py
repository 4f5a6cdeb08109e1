from nyx_tstlib import *
initTest(__file__)

import contextlib
import hashlib
import hmac
import io
import os
from unittest import mock

from libnyx.backend import HmacSha1Backend
from libnyx.exception import NyxError
from libnyx.hmac_sha1 import hmacSha1

# RFC 2202 HMAC-SHA1 test cases.
RFC2202 = (
	(b"\x0b" * 20,
	 b"Hi There",
	 "b617318655057264e28bc0b6fb378c8ef146be00"),
	(b"Jefe",
	 b"what do ya want for nothing?",
	 "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"),
	(b"\xaa" * 20,
	 b"\xdd" * 50,
	 "125d7342b9ac11cd91a39af48aa17b4f63f175d3"),
	(b"\xaa" * 80,
	 b"Test Using Larger Than Block-Size Key - Hash Key First",
	 "aa4ae5e15272d00e95705637ce8a3b55ed402112"),
	(b"\xaa" * 80,
	 b"Test Using Larger Than Block-Size Key and Larger Than One Block-Size Data",
	 "e8e99d0f45237d786d6bbaa7965c7808bbff1a91"),
)

class Test_HMAC_SHA1(TestCase):
	def test_rfc2202(self):
		for key, data, expected in RFC2202:
			self.assertEqual(hmacSha1(key, data), bytes.fromhex(expected))

	def test_key_lengths(self):
		message = b"\x00\x00\x00\x00\x00\x00\x00\x01"
		for keyLen in (0, 1, 20, 63, 64, 65, 128, 200):
			key = bytes((i * 13) & 0xFF for i in range(keyLen))
			self.assertEqual(hmacSha1(key, message),
					 hmac.new(key, message, hashlib.sha1).digest(),
					 "key length %d" % keyLen)

	def test_key_not_mutated(self):
		key = bytearray(b"secret")
		hmacSha1(key, b"message")
		self.assertEqual(key, bytearray(b"secret"))

class Test_Backend(TestCase):
	def setUp(self):
		HmacSha1Backend.reset()

	def tearDown(self):
		HmacSha1Backend.reset()

	def test_builtin(self):
		with mock.patch.dict(os.environ, {"NYX_CRYPTOLIB" : "builtin"}):
			backend = HmacSha1Backend.get()
			self.assertEqual(backend.name, "builtin")
			self.assertIs(backend, HmacSha1Backend.get())
			HmacSha1Backend.quickSelfTest()

	def test_default(self):
		with mock.patch.dict(os.environ, {"NYX_CRYPTOLIB" : ""}):
			self.assertEqual(HmacSha1Backend.get().name, "builtin")

	def test_cryptodome(self):
		with mock.patch.dict(os.environ, {"NYX_CRYPTOLIB" : "cryptodome"}):
			backend = HmacSha1Backend.get()
			self.assertEqual(backend.name, "cryptodome")
			HmacSha1Backend.quickSelfTest()
			for key, data, expected in RFC2202:
				self.assertEqual(backend.hmacSha1(key, data),
						 bytes.fromhex(expected))

	def test_builtin_matches_cryptodome(self):
		from Cryptodome.Hash import HMAC, SHA1
		for keyLen in (0, 10, 64, 90):
			key = os.urandom(keyLen)
			for dataLen in (0, 8, 55, 56, 64, 119):
				data = os.urandom(dataLen)
				self.assertEqual(hmacSha1(key, data),
						 HMAC.new(key, msg=data, digestmod=SHA1).digest())

	def test_debug(self):
		stderr = io.StringIO()
		with mock.patch.dict(os.environ, {"NYX_CRYPTOLIB" : "builtin",
						  "NYX_DEBUG" : "1"}), \
		     contextlib.redirect_stderr(stderr):
			HmacSha1Backend.get()
		self.assertIn("builtin HMAC-SHA1 backend", stderr.getvalue())

		HmacSha1Backend.reset()
		stderr = io.StringIO()
		with mock.patch.dict(os.environ, {"NYX_CRYPTOLIB" : "builtin",
						  "NYX_DEBUG" : "0"}), \
		     contextlib.redirect_stderr(stderr):
			HmacSha1Backend.get()
		self.assertEqual(stderr.getvalue(), "")

	def test_invalid(self):
		with mock.patch.dict(os.environ, {"NYX_CRYPTOLIB" : "foobar"}):
			self.assertRaises(NyxError, HmacSha1Backend.get)
