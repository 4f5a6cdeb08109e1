# -*- coding: utf-8 -*-
"""
# SHA-1 message digest (FIPS 180-4, RFC 3174)
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"SHA1",
	"sha1",
]

_MASK32 = 0xFFFFFFFF

def _rotl(x, n):
	return ((x << n) | (x >> (32 - n))) & _MASK32

class SHA1:
	"""SHA-1 hash object with a hashlib compatible interface.
	"""

	name		= "sha1"
	digest_size	= 160 // 8
	block_size	= 512 // 8

	INITIAL_STATE = (
		0x67452301,
		0xEFCDAB89,
		0x98BADCFE,
		0x10325476,
		0xC3D2E1F0,
	)

	def __init__(self, data=b""):
		self.__state = list(self.INITIAL_STATE)
		self.__buf = bytearray()
		self.__length = 0
		self.update(data)

	def update(self, data):
		"""Feed more message bytes into the hash.
		"""
		data = memoryview(data).cast("B")
		self.__length += len(data)
		blockSize = self.block_size
		offset = 0
		if self.__buf:
			# Complete the pending partial block first.
			fill = min(blockSize - len(self.__buf), len(data))
			self.__buf += data[:fill]
			offset = fill
			if len(self.__buf) < blockSize:
				return
			self.__compress(self.__state, self.__buf)
			self.__buf = bytearray()
		while len(data) - offset >= blockSize:
			self.__compress(self.__state, data[offset:offset+blockSize])
			offset += blockSize
		self.__buf += data[offset:]

	def digest(self):
		"""Return the 20 byte digest of all data fed so far.
		The object stays usable for more update() calls.
		"""
		state = list(self.__state)
		bitLength = (self.__length * 8) & 0xFFFFFFFFFFFFFFFF
		padLen = (55 - self.__length) % self.block_size
		tail = self.__buf + b"\x80" + (b"\x00" * padLen)
		tail += bitLength.to_bytes(length=8, byteorder="big", signed=False)
		assert len(tail) % self.block_size == 0
		for i in range(0, len(tail), self.block_size):
			self.__compress(state, tail[i:i+self.block_size])
		return b"".join(w.to_bytes(length=4, byteorder="big", signed=False)
				for w in state)

	def hexdigest(self):
		return self.digest().hex()

	def copy(self):
		other = self.__class__()
		other.__state = list(self.__state)
		other.__buf = bytearray(self.__buf)
		other.__length = self.__length
		return other

	@staticmethod
	def __compress(state, block):
		"""Process one 64 byte block and accumulate into state.
		"""
		w = [ int.from_bytes(block[i:i+4], byteorder="big", signed=False)
		      for i in range(0, 64, 4) ]
		for i in range(16, 80):
			w.append(_rotl(w[i-3] ^ w[i-8] ^ w[i-14] ^ w[i-16], 1))

		a, b, c, d, e = state
		for i in range(80):
			if i < 20:
				f = (b & c) | (~b & d)		# Ch
				k = 0x5A827999
			elif i < 40:
				f = b ^ c ^ d			# Parity
				k = 0x6ED9EBA1
			elif i < 60:
				f = (b & c) | (b & d) | (c & d)	# Maj
				k = 0x8F1BBCDC
			else:
				f = b ^ c ^ d			# Parity
				k = 0xCA62C1D6
			tmp = (_rotl(a, 5) + (f & _MASK32) + e + k + w[i]) & _MASK32
			e = d
			d = c
			c = _rotl(b, 30)
			b = a
			a = tmp

		state[0] = (state[0] + a) & _MASK32
		state[1] = (state[1] + b) & _MASK32
		state[2] = (state[2] + c) & _MASK32
		state[3] = (state[3] + d) & _MASK32
		state[4] = (state[4] + e) & _MASK32

def sha1(data):
	"""Calculate the SHA-1 digest of data.
	Returns the 20 digest bytes.
	"""
	return SHA1(data).digest()
