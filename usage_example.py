# usage_example.py
# Minimal usage example for the antifragile package.
# This file is not part of the antifragile package. For reference only.

import math

from antifragile import PayoffFunction, Triad, Verified, classify, classify_with_tolerance

# Systems
square = PayoffFunction(lambda x: x * x, name="x^2")              # convex
root = PayoffFunction(lambda x: math.sqrt(abs(x)), name="sqrt|x|")  # concave
affine = PayoffFunction(lambda x: 2 * x + 5, name="2x+5")          # linear

# Classify at x = 10 with perturbation 1
# x^2    : 81 + 121 = 202 > 2 * 100 = 200
# sqrt|x|: 3 + 3.3166 = 6.3166 < 2 * 3.1623 = 6.3246
# 2x+5   : 23 + 27 = 50 == 2 * 25 = 50
for system, at, delta in ((square, 10.0, 1.0), (root, 10.0, 1.0), (affine, 10, 1)):
    print(f"{system.name:>8}: {classify(system, at, delta).as_str()}")

# The concave curvature is below 0.01, so a tolerance of 0.1 calls it robust.
print(f"sqrt|x| with tolerance 0.1: {classify_with_tolerance(root, 10.0, 1.0, 0.1).as_str()}")

# The three evaluated points behind a classification
sample = square.sample(10.0, 1.0)
print(f"x^2 sample: f(9) = {sample.f_minus}, f(10) = {sample.f_x}, f(11) = {sample.f_plus}")

# Verified wraps a system with its classification
verified = Verified.check(square, 10.0, 1.0)
print(f"verified x^2: {verified.classification.as_str()}, payoff(3) = {verified.payoff(3)}")
print(f"still holds at x = -4: {verified.still_holds(-4.0, 0.5)}")

# Ordering and conversions
ranked = sorted([Triad.ANTIFRAGILE, Triad.FRAGILE, Triad.ROBUST])
print("sorted:", [t.as_str() for t in ranked])
print("bytes: ", [t.to_byte() for t in ranked])
print("parse('ANTIFRAGILE'):", Triad.parse("ANTIFRAGILE").as_str())
print("str(ROBUST):", str(Triad.ROBUST))

# Expected output:
#      x^2: antifragile
#  sqrt|x|: fragile
#     2x+5: robust
# sqrt|x| with tolerance 0.1: robust
# x^2 sample: f(9) = 81.0, f(10) = 100.0, f(11) = 121.0
# verified x^2: antifragile, payoff(3) = 9
# still holds at x = -4: True
# sorted: ['fragile', 'robust', 'antifragile']
# bytes:  [0, 1, 2]
# parse('ANTIFRAGILE'): antifragile
# str(ROBUST): Robust (unaffected by volatility)
