"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with vectors, the camera pose and the derived telemetry.
"""
