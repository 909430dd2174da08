# ===== Built-in defaults (catalogue, sweeps, luck policy) =====

# Tiers from most to least frequent
RARITIES: tuple[str, ...] = ("Common", "Rare", "Epic", "Legendary", "Mythic")

# Odds of the rarest catalogue entry; rarity factor reaches 1.0 here
DEFAULT_MAX_ODDS: float = 1e7

# (odds, rarity) pairs, same table the spin service rolls against
DEFAULT_CATALOGUE: list[tuple[float, str]] = [
    (2, "Common"),
    (5, "Common"),
    (7, "Common"),
    (12, "Common"),
    (20, "Common"),
    (22, "Common"),
    (40, "Rare"),
    (50, "Rare"),
    (100, "Rare"),
    (200, "Rare"),
    (500, "Rare"),
    (1000, "Rare"),
    (2000, "Epic"),
    (5000, "Epic"),
    (8500, "Epic"),
    (13000, "Epic"),
    (23000, "Epic"),
    (36000, "Epic"),
    (100000, "Legendary"),
    (500000, "Legendary"),
    (1000000, "Legendary"),
    (5000000, "Mythic"),
    (10000000, "Mythic"),
]

# Abstract luck multipliers for the first table
DEFAULT_MULTIPLIER_SWEEP: list[float] = [
    1, 1.5, 2, 2.5, 3, 3.55, 4, 5, 6, 8, 10, 15, 20, 30, 50,
]

# Player luck stat values for the second table
DEFAULT_PLAYER_LUCK_SWEEP: list[int] = [
    0, 100, 200, 300, 400, 500, 600, 800, 1000, 1500, 2000, 3000, 5000,
]

# Player luck -> multiplier policy (Case 7 = 250% crate)
DEFAULT_POLICY_NAME: str = "Case 7"
DEFAULT_BASE_MULTIPLIER: float = 1.0
DEFAULT_CRATE_BONUS: float = 2.5
DEFAULT_LUCK_PER_PERCENT: int = 20
