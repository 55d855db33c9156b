class GameError(Exception):
    """
    base for every move/turn error the caller can recover from
    """


class InvalidMove(GameError):
    """
    board refused a placement
    """


class InvalidCoordinate(InvalidMove):
    def __init__(self, row, col):
        super().__init__(f"invalid position ({row}, {col}), must be 0-2")
        self.row = row; self.col = col


class CellOccupied(InvalidMove):
    def __init__(self, row, col, mark):
        super().__init__(f"cell ({row}, {col}) already taken by '{mark.value}'")
        self.row = row; self.col = col; self.mark = mark


class NotYourTurn(GameError):
    pass


class SessionNotStarted(GameError):
    def __init__(self):
        super().__init__("no game running, start a new game first")


class BoardStateError(RuntimeError):
    """
    internal consistency fault, e.g. ai asked to move on a full board
    """
