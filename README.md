# bmpfilter

Apply simple filters to uncompressed 24-bit BMP images. It can keep only the
red, green or blue channel, or blur the image with a box average.

## Installation

```
pip install .
```

## Command line

```
bmpfilter INPUT OUTPUT OPERATION
```

`OPERATION` is one of `red`, `green`, `blue` or `blur`. On the command line,
`blur` always uses a 7×7 window.

```
bmpfilter cat.bmp cat_red.bmp red
bmpfilter cat.bmp cat_blurred.bmp blur
```

The command first checks that the input begins with the `BM` signature. If it
does, it prints `Valid bitmap`, applies the operation and writes the result.
The output keeps the input's headers unchanged.

If the input lacks the signature, the command prints `Not a bitmap` to
standard error. If the file cannot be opened, is truncated or has an
inconsistent header, it prints a `bmpfilter: ...` message to standard error.
In both cases the exit status is 1. On success the exit status is 0.

## Library use

```python
from bmpfilter.bitmap import Bitmap

with open("cat.bmp", "rb") as src:
    image = Bitmap.read(src)

with open("cat_blurred.bmp", "wb") as dst:
    image.blur(7, 7).write(dst)
```

- `bmpfilter.bitmap.Bitmap` pairs a header (`meta`) with a pixel grid
  (`image`).
  - `Bitmap.read(stream)` reads both from a seekable binary stream.
  - `write(stream)` writes both back and flushes the stream.
  - `red()`, `green()`, `blue()` and `blur(...)` each return a new `Bitmap`.
- `bmpfilter.fileinfo.FileInfo` is the 54-byte file and DIB header, read and
  written little-endian at the start of a stream.
  - `FileInfo.read(stream)` raises `EOFError` on a short header.
  - `padding()` gives the number of padding bytes at the end of each pixel
    row. It raises `ValueError` if the height is zero or if the raw size is
    too small for the width.
- `bmpfilter.pixel.Pixel` is an immutable RGB value. `red_only()`,
  `green_only()` and `blue_only()` zero the other two channels.
- `bmpfilter.pixel.PixelArray` holds the pixels in row-major order and is
  indexed by `(x, y)`. Indexing outside the grid raises `IndexError`.
  - `PixelArray.read(stream, width, height, offset, padding)` reads BGR rows.
  - `write(stream, offset, padding)` writes BGR rows followed by zero padding.
  - `map(func)` applies a function to every pixel.
  - `red()`, `green()` and `blue()` apply the channel filters.
  - `blur(blur_y, blur_x)` averages each pixel over a window clipped at the
    image edges, rounding down. It raises `ValueError` for a window smaller
    than 1×1.
  - Each of these returns a new array.

## Limitations

- Only uncompressed 24-bit images are handled. The compression, bit depth and
  colour-table fields of the header are carried through but not interpreted.
- The header values are not validated beyond what `padding()` checks.
- The package does not convert between image formats or display images.

## Tests

```
pip install ".[test]"
pytest
```