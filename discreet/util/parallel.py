import os
import multiprocessing as mp


def auto_nprocs():
    return int(os.getenv('OMP_NUM_THREADS', mp.cpu_count()))


def parallel_map(func, items, n_procs=1):
    """Apply `func` to every element of `items`, fanning out over a
    process pool when more than one process is requested.

    Parameters
    ----------
    func : callable
        Picklable, single-argument callable (module-level functions and
        `functools.partial` objects over them both work).
    items : iterable
        Arguments to `func`.
    n_procs : int, default=1
        Number of worker processes. None means `auto_nprocs()`.

    Returns
    -------
    results : list
        `func(item)` for each item, in the order of `items`.
    """

    items = list(items)

    if n_procs is None:
        n_procs = auto_nprocs()

    if n_procs > 1 and len(items) > 1:
        n_procs = min(len(items), n_procs)
        with mp.Pool(processes=n_procs) as pool:
            return pool.map(func, items)

    return [func(item) for item in items]
