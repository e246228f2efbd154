from rich.pretty import pprint

from printfy import *

__prog__ = "printfy-demo"


if __name__ == '__main__':
    pprint(interpret("#010.3x"))
    printf("%s, %s %d, %.2d:%.2d\n", "Wednesday", "July", 27, 14, 4)
    printf("%-8s|%8.2f|%#x\n", "total", 1234.5678, 255)
    pprint(sformat("% 05d|%.3s", 42, "truncated"))
    # unsupported directive: rendered on stderr, exit status 1
    printf("%*d\n", 5)
