"""`specscope` - Spectrum analysis of whitespace-delimited complex sample text.

Subpackages:
- ingest: Text to Dataset validation stages
- pipeline: Parser, versioned dataset slot, session facade
- spectral: Bin indexing (fftfreq/fftshift), transform adapter, spectrum
- contracts: Stage invariants
- schemas: Pydantic configuration
- visualization: Plotting
- cli: Command-line runner
"""

__version__ = "0.1.0"
