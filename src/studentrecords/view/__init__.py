"""
The VIEW layer: Qt widgets only. It emits intent signals and draws whatever
the controller hands it.
"""
