"""
The CONTROLLER layer turns gestures into stick vectors and stick vectors into
camera motion. Like the model it does not import Qt, so it can be driven by
any host loop (and by the tests).
"""
