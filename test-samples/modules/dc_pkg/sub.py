def helper(x):
    return x


def other():
    return None
