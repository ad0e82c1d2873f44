from color_converter.internal.shared_state import SharedState

_sst = SharedState()
config = _sst.config
