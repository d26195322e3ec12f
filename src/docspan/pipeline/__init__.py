# topmark:header:start
#
#   project      : DocSpan
#   file         : __init__.py
#   file_relpath : src/docspan/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocSpan extraction pipeline package.

This package contains the components of the extraction pipeline:

- Marker patterns and line classification ([`docspan.pipeline.markers`][])
- The span extractor state machine ([`docspan.pipeline.extractor`][])
- The indentation normalizer ([`docspan.pipeline.normalizer`][])
- Document aggregation ([`docspan.pipeline.document`][])
- File reading and the per-file driver ([`docspan.pipeline.reader`][],
  [`docspan.pipeline.runner`][])
"""
