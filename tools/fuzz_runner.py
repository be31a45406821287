#!/usr/bin/env python3
# tools/fuzz_runner.py
#
# Mutation fuzzing of the decoder.
#
# Builds random valid documents, mutates them (byte flips, truncation,
# inserted delimiters, deep nesting) and feeds them to bdecode. Anything
# other than a BEncodingError is a crash. Documents that still decode are
# re-encoded and must decode to the same value and re-encode to the same bytes.
#
# Any failure prints a minimal repro payload and exits non-zero.

import base64
import logging
import os
import random
import sys

from tinybencode import BEncodingError, DecodeOptions, bdecode, bencode

SEED = int(os.environ.get("TINYBENCODE_SEED", "4242"))
ROUNDS = int(os.environ.get("TINYBENCODE_FUZZ_ROUNDS", "5000"))

log = logging.getLogger("fuzz_runner")

DELIMITERS = b"ilde:-0123456789"


def random_value(rng, depth=0):
    choice = rng.random()
    if depth > 6 or choice < 0.3:
        return rng.randint(-(2**70), 2**70)
    if choice < 0.6:
        return rng.randbytes(rng.randint(0, 12))
    if choice < 0.8:
        return [random_value(rng, depth + 1) for _ in range(rng.randint(0, 5))]
    return {
        rng.randbytes(rng.randint(0, 6)): random_value(rng, depth + 1)
        for _ in range(rng.randint(0, 5))
    }


def mutate(rng, data):
    data = bytearray(data)
    for _ in range(rng.randint(1, 4)):
        kind = rng.randint(0, 4)
        pos = rng.randint(0, len(data))
        if kind == 0 and data:
            data[min(pos, len(data) - 1)] = rng.randint(0, 255)
        elif kind == 1:
            del data[pos:]
        elif kind == 2:
            data.insert(pos, rng.choice(DELIMITERS))
        elif kind == 3 and data:
            del data[min(pos, len(data) - 1)]
        else:
            nesting = rng.randint(1, 200)
            data[pos:pos] = bytes([rng.choice(b"ld")]) * nesting
    return bytes(data)


def fail(label, payload, exc=None):
    print("FAILURE:", label)
    print("INPUT (base64):", base64.b64encode(payload).decode("ascii"))
    if exc is not None:
        print("EXCEPTION: %r" % exc)
    raise SystemExit(1)


def check(payload, options):
    try:
        value = bdecode(payload, options)
    except BEncodingError:
        return False
    except Exception as e:
        fail("decoder crashed", payload, e)
    encoded = bencode(value)
    if bdecode(encoded) != value or bencode(bdecode(encoded)) != encoded:
        fail("round trip not idempotent", payload)
    return True


def main():
    logging.basicConfig(level=logging.INFO)
    rng = random.Random(SEED)
    strict = DecodeOptions()
    lenient = DecodeOptions(allow_unordered_keys=True)
    accepted = 0
    for round_no in range(ROUNDS):
        document = bencode(random_value(rng))
        if not check(document, strict):
            fail("valid document rejected", document)
        sample = mutate(rng, document)
        accepted += check(sample, strict)
        check(sample, lenient)
        if round_no and round_no % 1000 == 0:
            log.info("%d rounds, %d mutated samples accepted" % (round_no, accepted))
    log.info("done: %d rounds (seed %d), %d accepted" % (ROUNDS, SEED, accepted))
    return 0


if __name__ == "__main__":
    sys.exit(main())
