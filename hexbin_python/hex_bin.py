class HexBin(list):
    """Records that fell into one hexagon, in input order, plus the hexagon's center and id"""
    def __init__(self, record, col=0, row=0, x=0.0, y=0.0):
        super().__init__([record])
        # Hexagon id (column, row) in the offset-row grid
        self.col = col
        self.row = row
        # Cartesian center coordinates for this hex
        self.x = x
        self.y = y

    def __repr__(self):
        return f"HexBin(col={self.col}, row={self.row}, x={self.x}, y={self.y}, records={list.__repr__(self)})"
