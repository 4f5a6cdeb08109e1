# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("nyx requires Python >=3.7")
del sys

import libnyx.backend
import libnyx.exception
import libnyx.hmac_sha1
import libnyx.otp
import libnyx.sha1
import libnyx.util
import libnyx.version

from libnyx.exception import *
from libnyx.otp import generate, verify
from libnyx.version import *

__version__ = VERSION_STRING
