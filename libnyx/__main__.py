# -*- coding: utf-8 -*-
"""
# nyx TOTP library
# Copyright (c) 2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import argparse
import libnyx
import os
import sys

__all__ = [
	"main",
]

def getSecret(args):
	secret = args.secret
	if secret is None:
		secret = os.getenv("NYX_SECRET", "")
	if not secret:
		secret = libnyx.util.readSecret("TOTP secret")
		if secret is None:
			return None
	if args.raw:
		return secret.encode("UTF-8")
	return libnyx.util.decodeBase32Secret(secret)

def run_selftest():
	libnyx.backend.HmacSha1Backend.quickSelfTest()
	print("Self test of the %s HMAC-SHA1 backend passed." % (
	      libnyx.backend.HmacSha1Backend.get().name))
	return 0

def run_generate(key, t, timeStep, nrDigits):
	print(libnyx.otp.totp(key=key, t=t, timeStep=timeStep, nrDigits=nrDigits))
	return 0

def run_verify(key, token, t, timeStep, nrDigits, skew):
	if libnyx.otp.totpVerify(key=key, token=token, t=t, timeStep=timeStep,
				 nrDigits=nrDigits, skew=skew):
		print("Token is valid.")
		return 0
	print("Token is NOT valid.", file=sys.stderr)
	return 1

def main(argv=None):
	p = argparse.ArgumentParser(
		description="TOTP token generator - "
			    "nyx version %s" % libnyx.__version__)
	p.add_argument("-v", "--version", action="store_true",
		       help="show the nyx version and exit")
	p.add_argument("-S", "--selftest", action="store_true",
		       help="run the HMAC-SHA1 backend self test and exit")
	p.add_argument("-r", "--raw", action="store_true",
		       help="SECRET is the raw key text instead of base32.")
	p.add_argument("-d", "--digits", type=int, default=libnyx.otp.DEFAULT_DIGITS,
		       help="Number of token digits. Default: %d" % libnyx.otp.DEFAULT_DIGITS)
	p.add_argument("-s", "--step", type=int, default=libnyx.otp.DEFAULT_TIME_STEP,
		       metavar="SECONDS",
		       help="TOTP time step. Default: %d" % libnyx.otp.DEFAULT_TIME_STEP)
	p.add_argument("-t", "--time", type=int, default=None, metavar="UNIXTIME",
		       help="Use UNIXTIME instead of the current time.")
	p.add_argument("-V", "--verify", type=str, default=None, metavar="TOKEN",
		       help="Check TOKEN instead of printing a token. "
			    "Exit code 0 means valid.")
	p.add_argument("-k", "--skew", type=int, default=libnyx.otp.DEFAULT_SKEW,
		       help="Number of time steps to accept before and after "
			    "the current one for --verify. Default: %d" % libnyx.otp.DEFAULT_SKEW)
	p.add_argument("secret", nargs="?", metavar="SECRET", default=None,
		       help="The base32 encoded TOTP secret. "
			    "If not given, NYX_SECRET is used or the secret is prompted for.")
	args = p.parse_args(argv)

	if args.version:
		print("nyx version %s" % libnyx.__version__)
		return 0

	try:
		if args.selftest:
			return run_selftest()
		key = getSecret(args)
		if key is None:
			return 1
		if args.verify is not None:
			return run_verify(key=key,
					  token=args.verify,
					  t=args.time,
					  timeStep=args.step,
					  nrDigits=args.digits,
					  skew=args.skew)
		return run_generate(key=key,
				    t=args.time,
				    timeStep=args.step,
				    nrDigits=args.digits)
	except libnyx.NyxError as e:
		print("nyx: " + str(e), file=sys.stderr)
		return 1

if __name__ == "__main__":
	sys.exit(main())
