"""Drawing for SKYGATE frame buffers."""
