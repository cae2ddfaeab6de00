def naked():
    return "naked"


def clothed():
    return "clothed"
