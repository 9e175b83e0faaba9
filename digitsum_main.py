"""
Day31: digitsum のエントリーポイント（薄いラッパー）

テストは `digitsum.py` を直接 import する。ここは CLI 実行の入口だけ。
"""

from __future__ import annotations

if __name__ == "__main__":
    from digitsum import main

    raise SystemExit(main())
