"""Page plugins turning a raw content file into rendered output.

Import plugins from their modules; importing them here would create an
import cycle with `mdpress.config`.
"""
