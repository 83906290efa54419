"""Tennis club query catalog: players, their towns and the penalties issued to them."""
