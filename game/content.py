"""Fixed content of the mansion: room layout and clue -> suspect rules.

Rooms without a clue carry ``None``.
"""

MANSION_LAYOUT = {
    "name": "Hall de Entrada",
    "clue": "Pegadas recentes no tapete.",
    "left": {
        "name": "Sala de Estar",
        "clue": "Retrato torto na parede.",
        "left": {"name": "Cozinha", "clue": "Faca molhada na pia."},
        "right": {"name": "Biblioteca", "clue": "Livro de receitas aberto na estante."},
    },
    "right": {
        "name": "Jardim",
        "clue": None,
        "left": {"name": "Garagem", "clue": "Chave do portao sumiu do quadro."},
        "right": {"name": "Escritorio", "clue": "Gaveta arrombada com documentos espalhados."},
    },
}

SUSPECT_RULES = [
    {"clue": "Pegadas recentes no tapete.", "suspect": "Intruso"},
    {"clue": "Retrato torto na parede.", "suspect": "Morador"},
    {"clue": "Faca molhada na pia.", "suspect": "Cozinheiro"},
    {"clue": "Livro de receitas aberto na estante.", "suspect": "Cozinheiro"},
    {"clue": "Chave do portao sumiu do quadro.", "suspect": "Morador"},
    {"clue": "Gaveta arrombada com documentos espalhados.", "suspect": "Intruso"},
]
