# game.py

class Game:
    """Base class for the mode engines. Each engine plays against one shared Session."""

    records_win = True

    def __init__(self, session):
        self.session = session

    def reset(self):
        """Reset mode state for a fresh round."""
        pass

    def update(self, sample, dt):
        """Advance the mode by dt seconds. Returns the next SessionState or None to stay."""
        return None

    def render_state(self):
        """Return a dict describing what the presentation layer should draw."""
        return {}
