import abc

import numpy


class InitializerBase(abc.ABC):
    """ The abstract base class for random weight initializers.
    """

    def __init__(self, random_state=None):
        """ Supply the initializer with the random state used for all of
        its draws

        Parameters
        ----------
        random_state: numpy.random.RandomState, default None
            Supply for reproducible results

        """
        if random_state is None:
            random_state = numpy.random.RandomState()

        if not isinstance(random_state, numpy.random.RandomState):
            msg = "`random_state` was type {} but should be RandomState"
            raise TypeError(msg.format(type(random_state)))

        self.random_state = random_state

    def __call__(self, shape):
        """ The __call__ function handles input validation, etc. This
        function is used internally and calls the user-implemented
        `initialize` member function.
        """
        shape = tuple(int(n) for n in shape)

        if any(n <= 0 for n in shape):
            msg = "All entries of `shape` ({}) must be positive"
            raise ValueError(msg.format(shape))

        weights = self.initialize(shape)

        # Validate the returned weights
        if not isinstance(weights, numpy.ndarray):
            msg = ("Returned weights were type {} but "
                   "should be numpy.ndarray")
            raise TypeError(msg.format(type(weights)))

        if weights.shape != shape:
            msg = "Returned weights were shape {} but should be {}"
            raise ValueError(msg.format(weights.shape, shape))

        return weights.astype(float)

    @abc.abstractmethod
    def initialize(self, shape):
        raise NotImplementedError
