from bpnn.initializer.initializer_base import InitializerBase


class UniformInitializer(InitializerBase):
    """ Draw each weight independently from the uniform distribution on
    `[low, high)`, which is `[-1, 1)` by default
    """

    def __init__(self, low=-1.0, high=1.0, random_state=None):
        """ Initialize a UniformInitializer object

        Parameters
        ----------
        low, high: float, defaults -1 and 1
            The bounds of the distribution

        random_state: numpy.random.RandomState, default None
            Supply for reproducible results

        """
        if not low < high:
            msg = "`low` ({}) must be less than `high` ({})"
            raise ValueError(msg.format(low, high))

        super().__init__(random_state=random_state)
        self.low = float(low)
        self.high = float(high)

    def initialize(self, shape):
        return self.random_state.uniform(self.low, self.high, size=shape)
