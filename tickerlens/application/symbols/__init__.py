"""
Symbols bounded context — application layer.

Use cases:
- ResolveAssetUseCase: free text → resolved asset (or nothing).
- DescribeAssetUseCase: known symbol → resolved asset.
"""
