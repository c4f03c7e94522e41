"""
cbc_vigenere — Live Demo
========================
Run:  python examples/demo_cbc_vigenere.py

Walks one message through the engine block by block, then shows what
chaining does to repeated plaintext and prints the full report.
"""

import sys, os, time
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cbc_vigenere        import CBCVigenereCipher, normalize
from cbc_vigenere.report import format_report, wrap_columns

LINE = "═" * 70
RAW  = "Attack at dawn!"
KEY  = "lemon"
IV   = "lemon"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
header("NORMALIZE")
message = normalize(RAW)
ok("Raw",   RAW)
ok("Clean", message)

# ─────────────────────────────────────────────────────────────────────────────
header("ENCRYPT — Vigenère in CBC mode")
cipher  = CBCVigenereCipher(KEY, IV)
t0      = time.perf_counter()
result  = cipher.encrypt(message)
elapsed = time.perf_counter() - t0
padded  = message + cipher.PAD_CHAR * result.pad_count
for b, (p, c) in enumerate(zip(wrap_columns(padded, cipher.block_size),
                               wrap_columns(result.ciphertext, cipher.block_size))):
    chain = cipher.iv if b == 0 else result.ciphertext[(b - 1) * cipher.block_size:b * cipher.block_size]
    print(f"  block {b}:  {p}  + {chain}  + {cipher.key}  →  {c}")
ok("Ciphertext", result.ciphertext)
ok("Pad letters", str(result.pad_count))
ok("Time",        f"{elapsed*1000:.3f} ms")

# ─────────────────────────────────────────────────────────────────────────────
header("CHAINING — identical blocks, different ciphertext")
repeated = CBCVigenereCipher("ab", "aa").encrypt("aaaaaa")
ok("Plaintext",  "aa aa aa")
ok("Ciphertext", " ".join(wrap_columns(repeated.ciphertext, 2)))

# ─────────────────────────────────────────────────────────────────────────────
header("REPORT")
print(format_report("<demo>", message, KEY, IV, result))
