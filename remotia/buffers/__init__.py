"""Buffer allocation, buffer-map frames and pools of reusable buffers."""