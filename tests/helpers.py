def player_nos(players):
    return [p.player_no for p in players]


def payment_nos(penalties):
    return [p.payment_no for p in penalties]


def player_names(players):
    return [p.name for p in players]
