"""rfoxkit - client kit for minting from RFOX NFT collections."""

__version__ = "0.1.0"
