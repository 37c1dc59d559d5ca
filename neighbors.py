from veb import KeyOutOfRange


def nearest_keys(tree, query, pre_step=5, succ_step=5):
    """
    Backward and forward search around a query key
    Input:
        tree (VEB): The tree to search
        query (int): The key to search around, member or not
        pre_step (int): The number of steps in the backward walk
        succ_step (int): The number of steps in the forward walk
    Output:
        res (list): Dictionaries with the key and its distance to the query,
        sorted by distance and then by key
    """
    res = []
    if tree.search(query):
        res.append((query, 0))

    # Backward search
    pre_prev = query
    p_count = 0
    while p_count < pre_step:
        pre = tree.predecessor(pre_prev)
        if pre is None:
            break
        res.append((pre, query - pre))
        p_count += 1
        pre_prev = pre

    # Forward search
    succ_prev = query
    s_count = 0
    while s_count < succ_step:
        succ = tree.successor(succ_prev)
        if succ is None:
            break
        res.append((succ, succ - query))
        s_count += 1
        succ_prev = succ

    attribute_list = ['key', 'dist']
    res_srt = sorted(res, key=lambda x: (x[1], x[0]))
    return [dict(zip(attribute_list, r)) for r in res_srt]


def keys_in_range(tree, start, stop):
    """
    Keys k with start <= k < stop in ascending order
    Bounds are checked here, before the walk starts; both may be one past the
    last key of the universe.
    Output:
        (generator): The keys of the range
    """
    for bound in (start, stop):
        if bound < 0 or bound > tree.u:
            raise KeyOutOfRange(bound, tree.u)
    return _walk_range(tree, start, stop)


def _walk_range(tree, start, stop):
    if stop <= start:
        return
    if tree.search(start):
        key = start
    else:
        key = tree.successor(start)
    while key is not None and key < stop:
        yield key
        key = tree.successor(key)


def count_range(tree, start, stop):
    return sum(1 for _ in keys_in_range(tree, start, stop))
