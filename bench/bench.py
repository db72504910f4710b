#!/usr/bin/env python
from pairenc import ibe, abe
from pairenc.rand import SeededRandomSource
import time
import argparse
import numpy as np
import csv

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="run IBE and ABE benchmarks")
    parser.add_argument('-i','--iters',
        type=int,
        required=False,
        default=10,
        dest='iters',
        help='iterations of Extract/KeyGen, Enc and Dec to time (for a single setup)')
    parser.add_argument('-m','--msg-len',
        type=int,
        required=False,
        default=32,
        dest='msg_len',
        help='maximum message length in bytes; each iteration picks a random length in [1, msg_len]')
    parser.add_argument('-a','--attrs',
        type=int,
        required=False,
        default=3,
        dest='attrs',
        help='number of attributes per ABE key and ciphertext (1...255)')
    parser.add_argument('-s','--seed',
        type=str,
        required=False,
        default=None,
        dest='seed',
        help='use a seeded (deterministic) random source instead of OS entropy')
    args = parser.parse_args()
    if not 1 <= args.attrs <= 255:
        print("number of attributes must be between 1 and 255, got {}".format(args.attrs))
        exit(0)

    rng = SeededRandomSource(args.seed) if args.seed is not None else None

    ## Setup ###
    setup_time = time.time()
    secret, params = ibe.setup(rng=rng)
    setup_time = time.time()-setup_time
    print("Setup (s):\t", setup_time)
    print("--------------------------")

    prefix = 'bench{}a{}_'.format(args.msg_len, args.attrs)
    f_ibe = open(prefix+'ibe.csv', 'w')
    f_abe = open(prefix+'abe.csv', 'w')
    writer_ibe = csv.writer(f_ibe)
    writer_abe = csv.writer(f_abe)
    writer_ibe.writerow(['Extract', 'Enc', 'Dec'])
    writer_abe.writerow(['KeyGen', 'Enc', 'Dec'])
    times = {
        "IBE Extract": [],
        "IBE Enc": [],
        "IBE Dec": [],
        "ABE KeyGen": [],
        "ABE Enc": [],
        "ABE Dec": [],
    }

    msg_lens = np.random.randint(1, args.msg_len+1, size=args.iters).tolist()
    for i in range(args.iters):
        identity = "user{}@example.com".format(i)
        m = bytes(np.random.randint(0, 256, size=msg_lens[i]).tolist())

        ### IBE ###
        row = []
        t = time.time()
        key = ibe.extract(secret, identity)
        row += [time.time()-t]

        t = time.time()
        ct = ibe.encrypt(params, identity, m, rng=rng)
        row += [time.time()-t]

        t = time.time()
        m_prime = ibe.decrypt(key, ct)
        row += [time.time()-t]

        # ensure correctness
        assert(m == m_prime)
        writer_ibe.writerow(row)
        for name, v in zip(["IBE Extract", "IBE Enc", "IBE Dec"], row):
            times[name] += [v]

        ### ABE ###
        attributes = ["attr{}-{}".format(i, j) for j in range(args.attrs)]
        row = []
        t = time.time()
        sk = abe.keygen(secret, attributes)
        row += [time.time()-t]

        t = time.time()
        ct = abe.encrypt(params, attributes, m, rng=rng)
        row += [time.time()-t]

        t = time.time()
        m_prime = abe.decrypt(sk.key, sk.attributes, ct)
        row += [time.time()-t]

        assert(m == m_prime)
        writer_abe.writerow(row)
        for name, v in zip(["ABE KeyGen", "ABE Enc", "ABE Dec"], row):
            times[name] += [v]

        print(i if i>0 and i%10==0 else ".", end="", flush=True)

    f_ibe.close()
    f_abe.close()

    print("\nAverage Times (s)")
    print("--------------------------")
    for key in times.keys():
        print("{}:\t{}\t(avg of {})".format(key,np.mean(times[key]),args.iters))
