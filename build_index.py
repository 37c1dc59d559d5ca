import argparse
import os
import time
import numpy as np
import h5py
from tqdm import tqdm
from veb import VEB


def load_keys(keys_path):
    """
    Function that loads integer keys from disk
    Input:
        keys_path (str): .h5 file with a 'keys' dataset, .npy file,
        or text file of whitespace separated integers
    Output:
        keys (np.array): 1-D int64 array of keys
    """
    ext = os.path.splitext(keys_path)[1].lower()
    if ext in ('.h5', '.hdf5'):
        with h5py.File(keys_path, 'r') as hf:
            keys = hf['keys'][:]
    elif ext == '.npy':
        keys = np.load(keys_path)
    else:
        with open(keys_path, 'r') as handle:
            keys = [int(tok) for tok in handle.read().split()]
    return np.asarray(keys, dtype=np.int64).reshape(-1)


def save_keys(output_path, keys):
    with h5py.File(output_path, 'w') as hf:
        hf.create_dataset('keys', data=np.asarray(keys, dtype=np.int64))
    return output_path


def random_keys(num_keys, universe, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, universe, size=num_keys, dtype=np.int64)


def build_tree(keys, universe=None, progress=False):
    """
    Build a VEB tree holding the given keys
    Input:
        keys (iterable or np.array): Non-negative integer keys, duplicates allowed
        universe (int): Universe size; defaults to max(keys) + 1
        progress (bool): Show a tqdm progress bar while inserting
    Output:
        veb (VEB): The populated tree
    """
    if isinstance(keys, np.ndarray):
        keys = keys.astype(np.int64).reshape(-1)
    else:
        keys = np.fromiter(keys, dtype=np.int64)
    if universe is None:
        if keys.size == 0:
            raise ValueError("cannot infer the universe size from an empty key list")
        universe = int(keys.max()) + 1
    veb = VEB(universe)
    for k in tqdm(keys, disable=not progress):
        veb.insert(int(k))
    return veb


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Build a VEB tree from integer keys')
    parser.add_argument("--keys_path", type=str, default=None,
                        help="Path to the keys (.h5, .npy or text); random keys if omitted")
    parser.add_argument("--universe", type=int, default=None,
                        help="Universe size, defaults to the largest key + 1")
    parser.add_argument("--num_keys", type=int, default=100000,
                        help="Number of random keys to generate")
    parser.add_argument("--seed", type=int, default=0,
                        help="Random seed for generated keys")
    parser.add_argument("--save_keys", type=str, default=None,
                        help="Store the keys used into this .h5 file")
    args = parser.parse_args()

    if args.keys_path is not None:
        print("Loading keys from {}".format(args.keys_path))
        keys = load_keys(args.keys_path)
    else:
        universe = args.universe if args.universe is not None else 1 << 20
        print("Generating {} random keys".format(args.num_keys))
        keys = random_keys(args.num_keys, universe, seed=args.seed)
    if args.save_keys is not None:
        save_keys(args.save_keys, keys)

    t_start = time.time()
    veb = build_tree(keys, universe=args.universe, progress=True)
    print("")
    print("Universe size of veb tree:", veb.u)
    print("Number of keys: {} ({} distinct)".format(len(keys), len(veb)))
    print("Building takes {}".format(time.time() - t_start))
