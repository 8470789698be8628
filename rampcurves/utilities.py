epsilon = 1e-10
inf = 1e300


def FuzzyEquals(a, b, epsilon):
    return abs(a - b) <= epsilon


def FuzzyZero(a, epsilon):
    return abs(a) <= epsilon


def GenerateStringFromVector(vect):
    """Return a string representation of the given sequence of numbers with every element written in
    full precision, e.g. [ 1.000000000000000e+00, 2.500000000000000e-01]

    """
    s = "[ "
    separator = ""
    for val in vect:
        s += separator + "{0:.15e}".format(val)
        separator = ", "
    s += "]"
    return s
