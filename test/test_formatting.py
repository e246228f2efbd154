"""
Formatting entry point behavioral tests (format, sformat, printf).

Scope
- Validate literal fidelity and '%%' escapes.
- Validate argument/directive count matching.
- Validate width, fill, alignment, precision, sign and base rendering.
- Validate the restore invariant on the output stream.
- Validate that fatal directives stop the call after the literal text before them.

Conventions
- Test method names follow CamelCase per project convention.
- Faults are observed through the `propagate` handler installed in setUp.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase
from unittest.mock import patch

from printfy import FormatStream, configure, format, printf, propagate, sformat
from printfy.context import Align
from printfy.faults import (
    ArgumentCountMismatchError,
    DynamicPrecisionError,
    DynamicWidthError,
    MalformedSpecError,
    MissingConversionError,
    NotEnoughArgumentsError,
    TooManyArgumentsError,
    UnterminatedDirectiveError,
    WriteBackConversionError,
)


class FormattingTestCase(TestCase):
    def setUp(self):
        self.previous = configure(handler=propagate)

    def tearDown(self):
        configure(**self.previous)


class TestLiterals(FormattingTestCase):
    """Literal text and escapes."""

    def testLiteralFidelity(self):
        for template in ("", "hello world", "tabs\tand\nnewlines", "ünïcode ✓"):
            self.assertEqual(sformat(template), template)

    def testEscapedPercent(self):
        self.assertEqual(sformat("100%%"), "100%")
        self.assertEqual(sformat("%%%%"), "%%")
        self.assertEqual(sformat("%d%%", 5), "5%")

    def testOriginalDateExample(self):
        self.assertEqual(
            sformat("%s, %s %d, %.2d:%.2d\n", "Wednesday", "July", 27, 14, 4),
            "Wednesday, July 27, 14:04\n",
        )


class TestArgumentCount(FormattingTestCase):
    """Directive/argument count matching."""

    def testExactCount(self):
        self.assertEqual(sformat("%d", 5), "5")

    def testNotEnoughArguments(self):
        with self.assertRaises(NotEnoughArgumentsError) as cm:
            sformat("%d%d", 5)
        self.assertIsInstance(cm.exception, ArgumentCountMismatchError)

    def testTooManyArguments(self):
        with self.assertRaises(TooManyArgumentsError) as cm:
            sformat("%d", 5, 6)
        self.assertIsInstance(cm.exception, ArgumentCountMismatchError)
        self.assertIn("too many arguments", str(cm.exception))

    def testDirectiveWithoutArguments(self):
        with self.assertRaises(NotEnoughArgumentsError):
            sformat("value: %s")

    def testArgumentsWithoutDirectives(self):
        with self.assertRaises(TooManyArgumentsError):
            sformat("no directives", 1)

    def testMalformedTrailingDirectiveReportedFirst(self):
        with self.assertRaises(UnterminatedDirectiveError):
            sformat("%d then %5", 1)

    def testTrailingPercent(self):
        for args in ((), (1,)):
            with self.assertRaises(MissingConversionError):
                sformat("abc%", *args)

    def testLiteralBeforeMismatchIsFlushed(self):
        stream = FormatStream()
        with self.assertRaises(NotEnoughArgumentsError):
            format(stream, "a=%d, b=%d", 1)
        self.assertEqual(stream.getvalue(), "a=1, b=")


class TestIntegers(FormattingTestCase):
    """Integer rendering under width, fill, sign and base directives."""

    def testWidthAndFill(self):
        self.assertEqual(sformat("%5d", 3), "    3")
        self.assertEqual(sformat("%-5d|", 3), "3    |")
        self.assertEqual(sformat("%05d", 3), "00003")

    def testZeroFillKeepsSignFirst(self):
        self.assertEqual(sformat("%05d", -3), "-0003")
        self.assertEqual(sformat("%+05d", 3), "+0003")

    def testPrecisionAsMinimumDigits(self):
        self.assertEqual(sformat("%.4d", 7), "0007")
        self.assertEqual(sformat("%.4x", 255), "00ff")
        self.assertEqual(sformat("%6.4d|", 7), "     7|")

    def testSpacePadPositive(self):
        self.assertEqual(sformat("% d", 5), " 5")
        self.assertEqual(sformat("% d", -5), "-5")
        self.assertEqual(sformat("% 05d", 3), " 0003")

    def testPlusWinsOverSpace(self):
        self.assertEqual(sformat("% +d", 5), "+5")
        self.assertEqual(sformat("%+ d", 5), "+5")

    def testHexAndCase(self):
        self.assertEqual(sformat("%X", 255), "FF")
        self.assertEqual(sformat("%x", 255), "ff")
        self.assertEqual(sformat("%#x", 255), "0xff")
        self.assertEqual(sformat("%#X", 255), "0XFF")
        self.assertEqual(sformat("%#x", 0), "0")
        self.assertEqual(sformat("%#010x", 255), "0x000000ff")

    def testOctal(self):
        self.assertEqual(sformat("%o", 8), "10")
        self.assertEqual(sformat("%#o", 8), "010")

    def testSignOnlyInDecimal(self):
        self.assertEqual(sformat("%+x", 255), "ff")
        self.assertEqual(sformat("%+d", 255), "+255")
        self.assertEqual(sformat("%x", -255), "-ff")

    def testLengthModifiersIgnored(self):
        self.assertEqual(sformat("%ld %lld %hhx %zu", 1, 2, 255, 3), "1 2 ff 3")

    def testBigIntegers(self):
        self.assertEqual(sformat("%d", 10 ** 30), "1" + "0" * 30)

    def testIntegersStayIntegersUnderFloatConversions(self):
        self.assertEqual(sformat("%f", 5), "5")

    def testBooleans(self):
        self.assertEqual(sformat("%s", True), "True")
        self.assertEqual(sformat("%d", True), "1")
        self.assertEqual(sformat("%x", False), "0")


class TestFloats(FormattingTestCase):
    """Floating point rendering."""

    def testFixed(self):
        self.assertEqual(sformat("%f", 3.14159), "3.141590")
        self.assertEqual(sformat("%.2f", 3.14159), "3.14")
        self.assertEqual(sformat("%08.3f", -3.14159), "-003.142")
        self.assertEqual(sformat("%-8.1f|", 2.25), "2.2     |")

    def testScientific(self):
        self.assertEqual(sformat("%e", 1234.5), "1.234500e+03")
        self.assertEqual(sformat("%E", 1234.5), "1.234500E+03")

    def testGeneral(self):
        self.assertEqual(sformat("%g", 0.0001), "0.0001")
        self.assertEqual(sformat("%G", 1e-10), "1E-10")
        self.assertEqual(sformat("%g", 100000.0), "100000")

    def testAlternateFormKeepsPoint(self):
        self.assertEqual(sformat("%#.0f", 3.0), "3.")

    def testSigns(self):
        self.assertEqual(sformat("%+.1f", 2.0), "+2.0")
        self.assertEqual(sformat("% .2f", 1.5), " 1.50")
        self.assertEqual(sformat("% .2f", -1.5), "-1.50")

    def testHexFloatDegradesToDefault(self):
        self.assertEqual(sformat("%a", 1.5), "1.5")


class TestStringsAndCharacters(FormattingTestCase):
    """Strings, truncation and character values."""

    def testPrecisionTruncates(self):
        self.assertEqual(sformat("%.3s", "hello"), "hel")
        self.assertEqual(sformat("%.10s", "hello"), "hello")
        self.assertEqual(sformat("%.0s|", "hello"), "|")

    def testTruncatedTextIsStillPadded(self):
        self.assertEqual(sformat("%5.3s|", "hello"), "  hel|")
        self.assertEqual(sformat("%-5.3s|", "hello"), "hel  |")

    def testWidth(self):
        self.assertEqual(sformat("%10s|", "abc"), "       abc|")
        self.assertEqual(sformat("%-10s|", "abc"), "abc       |")

    def testTruncatesRenderedNonText(self):
        self.assertEqual(sformat("%.2s", 12345), "12")

    def testCharacterAsCharacterOrInteger(self):
        self.assertEqual(sformat("%c", "A"), "A")
        self.assertEqual(sformat("%d", "A"), "65")
        self.assertEqual(sformat("%x", "A"), "41")
        self.assertEqual(sformat("%s", "A"), "A")

    def testIntegerAsCharacter(self):
        self.assertEqual(sformat("%c", 66), "B")
        self.assertEqual(sformat("%3c|", 66), "  B|")

    def testArbitraryObjects(self):
        self.assertEqual(sformat("%s", [1, 2]), "[1, 2]")
        self.assertEqual(sformat("%s", None), "None")
        self.assertEqual(sformat("%8s|", None), "    None|")

    def testUnknownConversionRendersGenerically(self):
        self.assertEqual(sformat("%q", 5), "5")


class TestFatalDirectives(FormattingTestCase):
    """Unsupported directives fail after the literal text that precedes them."""

    def testFatalPaths(self):
        cases = (
            ("abc%*d", DynamicWidthError),
            ("abc%.*f", DynamicPrecisionError),
            ("abc%n", WriteBackConversionError),
        )
        for template, fault in cases:
            stream = FormatStream()
            with self.assertRaises(fault):
                format(stream, template, 1)
            self.assertEqual(stream.getvalue(), "abc", template)

    def testFatalPathsAreMalformedSpecs(self):
        for template in ("%*d", "%.*f", "%n"):
            with self.assertRaises(MalformedSpecError):
                sformat(template, 1)


class TestRestoreInvariant(FormattingTestCase):
    """The stream context never leaks between values or calls."""

    def testContextRestoredAfterCall(self):
        stream = FormatStream()
        stream.context.fill = "*"
        stream.context.width = 7
        stream.context.precision = 3
        stream.context.align = Align.LEFT
        baseline = stream.context.copy()
        format(stream, "%-5d|%08.2f|%.1s|%#X", 1, 2.5, "xy", 255)
        self.assertEqual(stream.getvalue(), "1    |00002.50|x|0XFF")
        self.assertEqual(stream.context, baseline)

    def testContextRestoredAfterFault(self):
        stream = FormatStream()
        baseline = stream.context.copy()
        with self.assertRaises(WriteBackConversionError):
            format(stream, "%05d%n", 1, 2)
        self.assertEqual(stream.context, baseline)

    def testWidthDoesNotLeakToNextValue(self):
        self.assertEqual(sformat("%5d%d", 1, 2), "    12")
        self.assertEqual(sformat("%#x %d", 255, 255), "0xff 255")


class TestEntryPoints(FormattingTestCase):
    """format() on plain writers, sformat() and printf()."""

    def testFormatWrapsPlainWriters(self):
        buffer = io.StringIO()
        format(buffer, "%s-%s", "a", 1)
        self.assertEqual(buffer.getvalue(), "a-1")

    def testFormatRejectsNonStringTemplate(self):
        with self.assertRaises(TypeError):
            format(io.StringIO(), b"%d", 1)

    def testPrintfWritesToStdout(self):
        with patch("sys.stdout", new_callable=io.StringIO) as stdout:
            printf("%d items\n", 42)
        self.assertEqual(stdout.getvalue(), "42 items\n")


if __name__ == "__main__":
    unittest.main()
