#!/usr/bin/env python3
"""
Demo of order-preserving encryption with Fast-OPE and MOPE.

This demonstrates the basic usage:
1. Generate a key
2. Encrypt a set of int16 values
3. Answer a range query by comparing ciphertexts only
4. Decrypt the matches
"""

import sys
import time
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ope import typed
from ope.fast import FastOpeCipher
from ope.mope import MopeCipher, MopeConfig
from ope.utils import range_filter, to_hex

PLAINTEXTS = [
    -30000, -20000, -10000, -5000, -2000, -1500, -1000, -500, -100, -10, -5, -1,
    0, 1, 5, 10, 100, 500, 1000, 1500, 2000, 5000, 10000, 20000, 30000,
]


def run(name, cipher, low_value, high_value):
    print("=" * 60)
    print(f"{name}")
    print("=" * 60)

    print("\n[1] Generating key...")
    start = time.time()
    key = cipher.generate_key()
    print(f"    Key generated in {(time.time() - start) * 1000:.2f}ms")
    print(f"    Encoded key size: {len(key.encode_key())} bytes")

    print("\n[2] Encrypting data set...")
    start = time.time()
    ciphertexts = [typed.encrypt_int16(key, v) for v in PLAINTEXTS]
    print(f"    {len(ciphertexts)} values encrypted in {(time.time() - start) * 1000:.2f}ms")
    for value, ciphertext in zip(PLAINTEXTS, ciphertexts):
        print(f"    {value:6d} => {to_hex(ciphertext)}")

    print(f"\n[3] Range query [{low_value}, {high_value}]...")
    low = typed.encrypt_int16(key, low_value)
    high = typed.encrypt_int16(key, high_value)
    print(f"    Min ciphertext = {to_hex(low)}")
    print(f"    Max ciphertext = {to_hex(high)}")
    if low > high:
        # MOPE offset falls inside the range; the query would need splitting
        print("    Range wraps around the modular offset; skipping")
        return
    results = range_filter(ciphertexts, low, high)

    print("\n[4] Decrypting results...")
    values = [typed.decrypt_int16(key, c) for c in results]
    correct = all(low_value <= v <= high_value for v in values)
    print(f"    {len(values)} results: {values}")
    print(f"    correct={correct}\n")


def main():
    run("Fast-OPE", FastOpeCipher(), -100, 1000)
    run("MOPE over Fast-OPE", MopeCipher(FastOpeCipher(), MopeConfig(plaintext_bytes=2)), -100, 1000)

    print("=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
