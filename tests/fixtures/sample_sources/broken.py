def broken(:
    D(value)  # marker: broken
