""" Tools for creating pools of worker processes
"""
import multiprocessing.pool
import functools
from multiprocessing import TimeoutError, cpu_count
import signal
import atexit
import logging


# Allow the pool to be interrupted, need to disable the children processes
# from intercepting the keyboard interrupt
def _noint(init, *args):
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    if init is not None:
        return init(*args)


def _shutdown_pool(p):
    p.terminate()
    p.join()


class InterruptiblePool(multiprocessing.pool.Pool):
    """ Multiprocessing pool whose map can be interrupted from the keyboard
    """
    def __init__(self, processes=None, initializer=None, initargs=(), **kwds):
        noint = functools.partial(_noint, initializer)
        super(InterruptiblePool, self).__init__(processes, noint, initargs,
                                                **kwds)
        atexit.register(_shutdown_pool, self)

    def __len__(self):
        return len(self._pool)

    def map(self, func, items, chunksize=None):
        """ Catch keyboard interuppts to allow the pool to exit cleanly.

        The first exception raised by any call is re-raised here, after
        which the remaining results are discarded.

        Parameters
        ----------
        func: function
            Function to call
        items: list of tuples
            Arguments to pass
        chunksize: int, Optional
            Number of calls for each process to handle at once
        """
        results = self.map_async(func, items, chunksize)
        while True:
            try:
                return results.get(1800)
            except TimeoutError:
                pass
            except KeyboardInterrupt:
                self.terminate()
                self.join()
                raise KeyboardInterrupt


class SinglePool(object):
    """ Stand-in for a pool that runs everything in the calling process
    """
    size = 1

    def map(self, f, items):
        return [f(a) for a in items]

    def close(self):
        pass

    def join(self):
        pass


def choose_pool(processes):
    """ Get processing pool

    Parameters
    ----------
    processes : int
        Number of worker processes. 1 gives a pool running in the calling
        process, -1 one worker per cpu.
    """
    if processes == 1:
        pool = SinglePool()
    else:
        if processes == -1:
            processes = cpu_count()
        logging.info('Starting a pool of %d processes', processes)
        pool = InterruptiblePool(processes)

    pool.size = processes
    return pool
