#!/usr/bin/env python
import time
from py_ecc.optimized_bn128 import G1, G2, multiply
from pairenc import encoding
from pairenc.groups import derive_key, hash_to_g2, pair
from pairenc.rand import RandomSource

if __name__ == "__main__":
    rng = RandomSource()

    # random groups elements
    a = multiply(G1, rng.random_scalar())
    b = multiply(G2, rng.random_scalar())

    # more random scalars
    scalar1 = rng.random_scalar()
    scalar2 = rng.random_scalar()
    scalart = rng.random_scalar()

    exp_g1_time = 0.0
    exp_g2_time = 0.0
    pairing_time = 0.0
    exp_gt_time = 0.0
    hash_to_g2_time = 0.0
    derive_key_time = 0.0
    g1_serialize_time = 0.0
    g1_deserialize_time = 0.0
    g2_serialize_time = 0.0
    g2_deserialize_time = 0.0
    gt_serialize_time = 0.0

    iters = 10
    print("averaging over {} iterations".format(iters), end="", flush=True)
    for i in range(iters):
        # scalar multiplications
        start = time.time()
        a_exp = multiply(a, scalar1)
        exp_g1_time += time.time()-start

        start = time.time()
        b_exp = multiply(b, scalar2)
        exp_g2_time += time.time()-start

        # pairing
        start = time.time()
        c = pair(b, a)
        pairing_time += time.time()-start

        # GT exp
        start = time.time()
        c_exp = c ** scalart
        exp_gt_time += time.time()-start

        start = time.time()
        hash_to_g2("user{}@example.com".format(i))
        hash_to_g2_time += time.time()-start

        start = time.time()
        derive_key(c_exp)
        derive_key_time += time.time()-start

        # --- serialization ---
        # G1
        start = time.time()
        a_bytes = encoding.g1_to_binary(a_exp)
        g1_serialize_time += time.time()-start

        start = time.time()
        encoding.g1_from_binary(a_bytes)
        g1_deserialize_time += time.time()-start

        # G2
        start = time.time()
        b_bytes = encoding.g2_to_binary(b_exp)
        g2_serialize_time += time.time()-start

        start = time.time()
        encoding.g2_from_binary(b_bytes)
        g2_deserialize_time += time.time()-start

        # GT
        start = time.time()
        c_bytes = encoding.gt_to_binary(c_exp)
        gt_serialize_time += time.time()-start

        print(".", end="", flush=True)

    print("\n")
    print("mul in G1\t{}".format(exp_g1_time / iters))
    print("mul in G2\t{}".format(exp_g2_time / iters))
    print("exp in GT\t{}".format(exp_gt_time / iters))
    print()
    print("pairing\t\t{}".format(pairing_time / iters))
    print("hash to G2\t{}".format(hash_to_g2_time / iters))
    print("derive key\t{}".format(derive_key_time / iters))
    print()
    print("serialize in G1\t\t{}".format(g1_serialize_time / iters))
    print("deserialize in G1\t{}".format(g1_deserialize_time / iters))
    print("serialize in G2\t\t{}".format(g2_serialize_time / iters))
    print("deserialize in G2\t{}".format(g2_deserialize_time / iters))
    print("serialize in GT\t\t{}".format(gt_serialize_time / iters))

    # sizes
    print()
    print("G1 bytes:\t{}".format(len(a_bytes)))
    print("G2 bytes:\t{}".format(len(b_bytes)))
    print("GT bytes:\t{}".format(len(c_bytes)))
