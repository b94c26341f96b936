import matplotlib.pyplot as plt
import networkx as nx
from matplotlib import rcParams

from DenseUtils import create_path_if_not_exist

'''
cluster - vertex inside the densest subgraph
periphery - vertex outside it with a neighbour inside
rest - everything else
'''


def draw_densest_subgraph(G, cluster, save_path=None, title='densest subgraph', show=False, seed=None):
    rcParams.update({'figure.autolayout': True})
    cluster = set(cluster)
    periphery = {u for v in cluster if v in G for u in G.neighbors(v)} - cluster
    colors = []
    for v in G.nodes:
        if v in cluster:
            colors.append('green')
        elif v in periphery:
            colors.append('orange')
        else:
            colors.append('lightcyan')
    edge_colors = ['green' if u in cluster and v in cluster else 'gray' for u, v in G.edges]

    fig = plt.figure()
    plt.title(title)
    pos = nx.spring_layout(G, seed=seed)
    nx.draw(G, pos, node_color=colors, edge_color=edge_colors, with_labels=True, font_size=7)
    if save_path is not None:
        create_path_if_not_exist(save_path)
        plt.savefig(save_path)
    if show:
        plt.show()
    plt.close(fig)
    return periphery
