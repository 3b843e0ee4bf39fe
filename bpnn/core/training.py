import numpy

from .propagation import as_vector


def stop_early(error_hist, hist_len=100, tol=0, dec=True):
    """
    Returns True when the linear trend over the `hist_len` most recent
    components of `error_hist` is greater (or lesser if dec=False) than `tol`.
    """
    if len(error_hist) < hist_len:
        return False

    x = numpy.c_[numpy.ones(hist_len), numpy.arange(hist_len) + 1]
    y = numpy.array(error_hist[-hist_len:], dtype=float)

    (_, slope), _, _, _ = numpy.linalg.lstsq(x, y, rcond=None)

    if dec:
        return slope >= tol
    return slope <= tol


def unpack_example(example):
    """ Returns the (input, target) pair of a training example given either
    as a pair or as a mapping with an 'input' key and a 'target' (or
    'output') key
    """
    if hasattr(example, 'keys'):
        if 'input' not in example:
            raise ValueError("Training example is missing the 'input' key")

        if 'target' in example:
            return example['input'], example['target']
        elif 'output' in example:
            return example['input'], example['output']

        msg = "Training example needs a 'target' or 'output' key"
        raise ValueError(msg)

    try:
        inputs, target = example
    except (TypeError, ValueError):
        msg = ("Training example of type {} should be an (input, target) "
               "pair or a mapping")
        raise ValueError(msg.format(type(example)))

    return inputs, target


def prepare_examples(examples, input_size, output_size):
    """ Validate every training example up front and convert it to a pair
    of float vectors

    Returns
    -------
    pairs: list of (ndarray, ndarray)
    """
    if isinstance(examples, (str, bytes)) or not numpy.iterable(examples):
        msg = "`examples` was type {} but should be a sequence of examples"
        raise ValueError(msg.format(type(examples)))

    pairs = []
    for index, example in enumerate(examples):
        inputs, target = unpack_example(example)
        pairs.append((
            as_vector(inputs, input_size, 'examples[{}].input'.format(index)),
            as_vector(target, output_size,
                      'examples[{}].target'.format(index)),
        ))

    return pairs
