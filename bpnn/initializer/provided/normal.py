from bpnn.initializer.initializer_base import InitializerBase


class NormalInitializer(InitializerBase):
    """ Draw each weight independently from a Gaussian with mean `loc` and
    standard deviation `scale` (the standard normal by default)
    """

    def __init__(self, loc=0.0, scale=1.0, random_state=None):
        if scale <= 0:
            msg = "`scale` ({}) must be positive"
            raise ValueError(msg.format(scale))

        super().__init__(random_state=random_state)
        self.loc = float(loc)
        self.scale = float(scale)

    def initialize(self, shape):
        return self.loc + self.scale * self.random_state.randn(*shape)
