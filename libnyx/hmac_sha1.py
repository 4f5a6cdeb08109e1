# -*- coding: utf-8 -*-
"""
# HMAC-SHA1 (RFC 2104)
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libnyx.sha1 import SHA1

__all__ = [
	"hmacSha1",
]

_IPAD = 0x36
_OPAD = 0x5C

def hmacSha1(key, message):
	"""Calculate the HMAC-SHA1 of message.
	key: The HMAC key bytes. Any length.
	message: The message bytes.
	Returns the 20 byte MAC.
	"""
	blockSize = SHA1.block_size

	if len(key) > blockSize:
		key = SHA1(key).digest()
	keyBlock = bytearray(blockSize)
	keyBlock[0:len(key)] = key

	inner = SHA1(bytes(k ^ _IPAD for k in keyBlock))
	inner.update(message)
	outer = SHA1(bytes(k ^ _OPAD for k in keyBlock))
	outer.update(inner.digest())
	return outer.digest()
