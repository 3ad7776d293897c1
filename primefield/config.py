"""Global configuration for primefield."""

import os

# ---------- Demo field (prime order) ----------
# The demo prints sample arithmetic in F_19.  Env var PRIMEFIELD_DEMO_PRIME
# swaps in another modulus; it must be prime and larger than both operands.
DEMO_PRIME = int(os.environ.get("PRIMEFIELD_DEMO_PRIME", "19"))

# ---------- Demo operands ----------
DEMO_A_NUM = 2
DEMO_B_NUM = 7
DEMO_EXPONENT = 3
