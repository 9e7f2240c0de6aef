import logging


def get_logger(name):
    """
    Internally calls the logging.getLogger function with the `name` argument to create or
    retrieve a logger object. Pass __name__ when calling it from a module.

    Parameters
    ----------
    name
        The name that gets passed to the logger.getLogger function.

    Returns
    -------
    A logger instance with the given name.
    """
    return logging.getLogger(name)


def raise_if_not(
    condition: bool,
    message: str = "",
    logger: logging.Logger = get_logger("dough_calc"),
):
    """
    Checks provided boolean condition and raises a ValueError if it evaluates to False.
    It logs the error to the provided logger before raising it.

    Parameters
    ----------
    condition
        The boolean condition to be checked.
    message
        The message of the ValueError.
    logger
        The logger instance to log the error message if 'condition' is False.

    Raises
    ------
    ValueError
        if `condition` is not satisfied
    """
    if not condition:
        logger.error("ValueError: " + message)
        raise ValueError(message)


def raise_log(exception: Exception, logger: logging.Logger = get_logger("dough_calc")):
    """
    Can be used to replace "raise" when throwing an exception to ensure the logging
    of the exception. After logging it, the exception is raised.

    Parameters
    ----------
    exception
        The exception instance to be raised.
    logger
        The logger instance to log the exception type and message.

    Raises
    ------
    Exception
        The provided exception
    """
    logger.error(type(exception).__name__ + ": " + str(exception))
    raise exception
