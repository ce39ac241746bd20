#!/usr/bin/env python3
"""Quick codec benchmark - direct timing only"""
import os
import time


PAYLOAD = os.urandom(64 * 1024)
ITERATIONS = 200


def bench(codec):
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        encoded = codec.encode(PAYLOAD)
    encode_time = time.perf_counter() - start

    start = time.perf_counter()
    for _ in range(ITERATIONS):
        decoded = codec.decode(encoded).unwrap()
    decode_time = time.perf_counter() - start
    assert decoded == PAYLOAD
    return encode_time, decode_time, encoded


def main():
    from bintext import base32codec, base45codec, base64codec, base64urlcodec, hexcodec

    print(f"Benchmarking encode/decode ({ITERATIONS} iterations)...")
    print(f"Input size: {len(PAYLOAD)} bytes\n")

    for codec in (hexcodec, base32codec, base45codec, base64codec, base64urlcodec):
        name = codec.__name__.rsplit(".", 1)[-1]
        encode_time, decode_time, encoded = bench(codec)
        print(f"{name}")
        print(f"  encode: {encode_time:.3f}s ({encode_time / ITERATIONS * 1000:.2f} ms/op)")
        print(f"  decode: {decode_time:.3f}s ({decode_time / ITERATIONS * 1000:.2f} ms/op)")
        print(f"  Output sample: {encoded[:60]}...")

    print("\n✅ Benchmark complete")


if __name__ == '__main__':
    main()
