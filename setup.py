#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup
import sys
from pathlib import Path

basedir = Path(__file__).parent.absolute()
sys.path.insert(0, str(basedir))

from libnyx import __version__

with open(basedir / "README.rst", "rb") as fd:
	readmeText = fd.read().decode("UTF-8")

setup(
	name		= "nyx-totp",
	version		= __version__,
	description	= "Small TOTP library with a self-contained HMAC-SHA1",
	author		= "Michael Büsch",
	author_email	= "m@bues.ch",
	license		= "GPL-2.0-or-later",
	python_requires = ">=3.7",
	install_requires = [
		"pycryptodomex",
	],
	extras_require	= {
		"test" : [ "pytest", ],
	},
	packages	= [ "libnyx", ],
	scripts		= [ "nyx", ],
	keywords	= "TOTP HOTP 2FA HMAC SHA1",
	classifiers	= [
		"Development Status :: 4 - Beta",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Intended Audience :: System Administrators",
		"Operating System :: OS Independent",
		"Programming Language :: Python :: 3",
		"Topic :: Security :: Cryptography",
	],
	long_description=readmeText,
	long_description_content_type="text/x-rst",
)

# vim: ts=8 sw=8 noexpandtab
