"""Namespace set aside for skinned widgets; it holds no modules yet."""