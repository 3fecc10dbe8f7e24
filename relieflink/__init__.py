"""ReliefLink: family search and rescue-report clustering for relief camps.

The package is a library consumed by the camp kiosk / coordinator serving
layer.  Every public function is a pure computation over
``RegistrantRecord`` objects; storage and HTTP live elsewhere.
"""
