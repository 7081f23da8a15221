"""
Find occurrences of a query graph in an input graph.

Both graphs are edge-list files ("u v" per line).  Example:

    python examples/find_motif.py network.txt triangle.txt --samples 100 --draw out.png
"""
import argparse
import logging

from motiftools import (
    MotifConfig,
    count_motif,
    draw_mapping,
    edges_to_query_graph,
    read_edgelist,
)


def run(input_path, query_path, samples=None, label=None, draw=None, verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    G = read_edgelist(input_path)
    Q = edges_to_query_graph(read_edgelist(query_path).edges(), label=label)
    cfg = MotifConfig.from_env()

    print(f"input: |V|={G.number_of_nodes()} |E|={G.number_of_edges()}")
    print(f"query: {Q.label}  |V|={Q.number_of_nodes()} |E|={Q.number_of_edges()}")

    freq = count_motif(Q, G, cfg, sample_count=samples)
    print(f"mappings: {freq.count}  (threshold {freq.threshold}, frequent={freq.frequent})")
    for m in freq.mappings[:20]:
        print("  ", ", ".join(f"{h}->{g}" for h, g in m.pairs))
    if len(freq.mappings) > 20:
        print(f"   ... {len(freq.mappings) - 20} more")

    if draw and freq.mappings:
        draw_mapping(G, freq.mappings[0], save_path=draw)
        print(f"drew first mapping to {draw}")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('input', help='edge list of the graph searched in')
    parser.add_argument('query', help='edge list of the query graph')
    parser.add_argument('--samples', type=int, default=None,
                        help='number of root vertices (default: |V| / MOTIFTOOLS_SAMPLE_DIVISOR)')
    parser.add_argument('--label', default=None)
    parser.add_argument('--draw', default=None, help='save a PNG of the first mapping here')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args()
    run(args.input, args.query, args.samples, args.label, args.draw, args.verbose)


if __name__ == '__main__':
    main()
