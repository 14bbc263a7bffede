"""Games built on the Stonefall framework."""
