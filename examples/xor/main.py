import logging

import numpy as np

from bpnn import Network
from bpnn.core.logger import setup_logging
from bpnn.util.on_iterate import stop_below
from bpnn.visualize import plot_error_history


setup_logging(filename='xor-log.txt')
logger = logging.getLogger('xor')

examples = [
    {'input': [0, 0], 'target': [0]},
    {'input': [0, 1], 'target': [1]},
    {'input': [1, 0], 'target': [1]},
    {'input': [1, 1], 'target': [0]},
]

network = Network(2, 1,
                  hidden_layer_count=1,
                  hidden_layer_sizes=4,
                  learn_bias=True,
                  iterations=10000,
                  random_state=np.random.RandomState(1234))

network.learn(examples, on_iterate=[stop_below(1e-3)])

for example in examples:
    output = network.predict(example['input'])
    logger.info("{} => {:.4f}".format(example['input'], output[0]))

logger.debug(network.to_json())

import matplotlib.pyplot as plt  # noqa: E402

plot_error_history(network.error_history)
plt.show()
