class DegenerateVectorError(ValueError):
    """Raised when a vector is too short to be normalized"""
    def __init__(self, vector, length):
        super().__init__(f"Cannot normalize {vector!r}: length {length:g} is below epsilon")
        self.vector = vector
        self.length = length
