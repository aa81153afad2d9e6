from plum import Dispatcher

# separate registry, so function names do not clash with other users of the global plum dispatcher
dispatch = Dispatcher()
