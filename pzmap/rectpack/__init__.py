"""Two-dimensional rectangle packing for sprite atlases."""