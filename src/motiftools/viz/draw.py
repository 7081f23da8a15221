from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from motiftools.search.mapping import Mapping


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable base layout:
      - planar_layout if planar
      - otherwise spring_layout
    """
    is_planar, _ = nx.check_planarity(G)
    if is_planar and G.number_of_nodes() > 0:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_mapping(
    input_graph: nx.Graph,
    mapping: Mapping,
    *,
    ax=None,
    seed: int = 7,
    node_size: int = 220,
    edge_width: float = 1.2,
    save_path: str | None = None,
):
    """
    Draw input_graph with one occurrence highlighted.

    Mapped vertices are drawn in red and labelled with their query vertex;
    images of query edges are drawn thick and red, incidental edges among
    the mapped vertices dashed.

    If save_path is set the figure is saved there and closed; otherwise the
    axes are returned for further drawing.
    """
    own_figure = ax is None
    if own_figure:
        fig, ax = plt.subplots(figsize=(7, 7))
    else:
        fig = ax.figure

    pos = base_layout(input_graph, seed=seed)
    image = mapping.image
    query_edges = list(mapping.map_on_input_subgraph.edges())
    extra_edges = [
        e for e in mapping.input_subgraph.edges()
        if not mapping.map_on_input_subgraph.has_edge(*e)
    ]

    ax.set_title(f"{len(mapping)} vertices, {len(query_edges)} query edges")
    ax.set_axis_off()

    nx.draw_networkx_edges(input_graph, pos=pos, ax=ax, width=edge_width, edge_color="0.75")
    nx.draw_networkx_nodes(
        input_graph,
        pos=pos,
        ax=ax,
        node_size=node_size,
        node_color=["tab:red" if v in image else "0.8" for v in input_graph.nodes()],
    )
    nx.draw_networkx_edges(input_graph, pos=pos, ax=ax, edgelist=query_edges, width=3 * edge_width, edge_color="tab:red")
    if extra_edges:
        nx.draw_networkx_edges(
            input_graph, pos=pos, ax=ax, edgelist=extra_edges, width=edge_width, edge_color="tab:red", style="dashed"
        )
    labels = {g: f"{h}:{g}" for h, g in mapping.function.items()}
    nx.draw_networkx_labels(input_graph, pos=pos, ax=ax, labels=labels, font_size=9)

    if save_path:
        fig.savefig(save_path, dpi=200)
        if own_figure:
            plt.close(fig)
    return ax
