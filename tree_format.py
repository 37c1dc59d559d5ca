def _node_line(tree):
    if tree.empty:
        return "u={} empty".format(tree.u)
    return "u={} ({},{}) n={}".format(tree.u, tree.min, tree.max, tree.n)


def format_tree(tree, indent="   "):
    """
    Render the recursive layout of a VEB tree for debugging
    Input:
        tree (VEB): The tree to render
        indent (str): Indentation added per level
    Output:
        text (str): One line per node; the summary and the clusters that
        have been materialised are nested below their parent
    """
    lines = []

    def walk(node, depth, label):
        pad = indent * depth
        lines.append(pad + label + _node_line(node))
        if node.u == 2:
            return
        lines.append(pad + "*Summary")
        walk(node.summary, depth + 1, "")
        used = [(h, c) for h, c in enumerate(node.clusters) if c is not None]
        if used:
            lines.append(pad + "*Clusters")
            for h, cluster in used:
                walk(cluster, depth + 1, "[{}] ".format(h))

    walk(tree, 0, "")
    return "\n".join(lines)


def print_tree(tree, indent="   "):
    print(format_tree(tree, indent=indent))
