# (team_id, team_name, division)
LEAGUE_TEAMS: tuple[tuple[str, str, str], ...] = (
    ("NYY", "New York Yankees", "AL East"),
    ("BAL", "Baltimore Orioles", "AL East"),
    ("BOS", "Boston Red Sox", "AL East"),
    ("TB", "Tampa Bay Rays", "AL East"),
    ("TOR", "Toronto Blue Jays", "AL East"),
    ("CLE", "Cleveland Guardians", "AL Central"),
    ("DET", "Detroit Tigers", "AL Central"),
    ("KC", "Kansas City Royals", "AL Central"),
    ("MIN", "Minnesota Twins", "AL Central"),
    ("CWS", "Chicago White Sox", "AL Central"),
    ("HOU", "Houston Astros", "AL West"),
    ("SEA", "Seattle Mariners", "AL West"),
    ("TEX", "Texas Rangers", "AL West"),
    ("LAA", "Los Angeles Angels", "AL West"),
    ("OAK", "Oakland Athletics", "AL West"),
    ("PHI", "Philadelphia Phillies", "NL East"),
    ("ATL", "Atlanta Braves", "NL East"),
    ("NYM", "New York Mets", "NL East"),
    ("WSH", "Washington Nationals", "NL East"),
    ("MIA", "Miami Marlins", "NL East"),
    ("MIL", "Milwaukee Brewers", "NL Central"),
    ("CHC", "Chicago Cubs", "NL Central"),
    ("STL", "St. Louis Cardinals", "NL Central"),
    ("CIN", "Cincinnati Reds", "NL Central"),
    ("PIT", "Pittsburgh Pirates", "NL Central"),
    ("LAD", "Los Angeles Dodgers", "NL West"),
    ("SF", "San Francisco Giants", "NL West"),
    ("SD", "San Diego Padres", "NL West"),
    ("ARI", "Arizona Diamondbacks", "NL West"),
    ("COL", "Colorado Rockies", "NL West"),
)
