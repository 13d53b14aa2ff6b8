"""Sub-package reserved for ASCII sentence converters; it holds no modules yet."""