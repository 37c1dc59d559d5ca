import argparse
import sys
import time
import numpy as np
from tqdm import tqdm
from build_index import build_tree, load_keys, random_keys

OPERATIONS = ['search', 'successor', 'predecessor']


def reference_answer(op, sorted_keys, query):
    """
    Answer a query from a sorted array of distinct keys
    Input:
        op (str): One of 'search', 'successor', 'predecessor'
        sorted_keys (np.array): Sorted distinct keys
        query (int): The query key
    Output:
        The expected answer of VEB.<op>(query)
    """
    if op == 'search':
        i = np.searchsorted(sorted_keys, query, side='left')
        return bool(i < len(sorted_keys) and sorted_keys[i] == query)
    elif op == 'successor':
        i = np.searchsorted(sorted_keys, query, side='right')
        return int(sorted_keys[i]) if i < len(sorted_keys) else None
    elif op == 'predecessor':
        i = np.searchsorted(sorted_keys, query, side='left') - 1
        return int(sorted_keys[i]) if i >= 0 else None
    raise ValueError("unknown operation {}".format(op))


def run_queries(veb, queries, ops, sorted_keys=None, progress=False):
    """
    Run the queries against the tree, optionally checking every answer
    Output:
        t_elapse (float): Time spent inside the tree
        mismatch (list): (op, query, got, expected) for every wrong answer
    """
    t_elapse = 0
    mismatch = []
    for op, q in tqdm(zip(ops, queries), total=len(queries), disable=not progress):
        q = int(q)
        t_start = time.time()
        got = getattr(veb, op)(q)
        t_elapse += time.time() - t_start
        if sorted_keys is not None:
            expected = reference_answer(op, sorted_keys, q)
            if got != expected:
                mismatch.append((op, q, got, expected))
    return t_elapse, mismatch


if __name__ == "__main__":
    parser = argparse.ArgumentParser("Run random queries against a VEB tree")
    parser.add_argument("--keys_path", type=str, default=None,
                        help="Path to the keys (.h5, .npy or text); random keys if omitted")
    parser.add_argument("--universe", type=int, default=None,
                        help="Universe size; 2^20 for random keys, largest key + 1 for loaded ones")
    parser.add_argument("--num_keys", type=int, default=100000,
                        help="Number of random keys to generate")
    parser.add_argument("--num_queries", type=int, default=100000,
                        help="Number of queries to run")
    parser.add_argument("--ops", nargs='+', choices=OPERATIONS, default=OPERATIONS,
                        help="Operations to draw queries from")
    parser.add_argument("--seed", type=int, default=0,
                        help="Random seed")
    parser.add_argument("--no_verify", action='store_true',
                        help="Skip checking answers against the sorted reference")
    args = parser.parse_args()

    universe = args.universe
    if args.keys_path is not None:
        keys = load_keys(args.keys_path)
    else:
        if universe is None:
            universe = 1 << 20
        keys = random_keys(args.num_keys, universe, seed=args.seed)

    t_start = time.time()
    veb = build_tree(keys, universe=universe)
    print("Building takes {}".format(time.time() - t_start))
    print("Universe size of veb tree:", veb.u)

    rng = np.random.default_rng(args.seed + 1)
    queries = rng.integers(0, veb.u, size=args.num_queries, dtype=np.int64)
    ops = rng.choice(args.ops, size=args.num_queries)
    sorted_keys = None if args.no_verify else np.unique(keys)

    t_elapse, mismatch = run_queries(veb, queries, ops, sorted_keys, progress=True)
    print("Search takes {} ({} queries)".format(t_elapse, args.num_queries))
    if not args.no_verify:
        print("Mismatches: {}".format(len(mismatch)))
        for op, q, got, expected in mismatch[:10]:
            print("{}({}) returned {}, expected {}".format(op, q, got, expected))
        if mismatch:
            sys.exit(1)
