
class RBSetError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class EmptyTreeError(RBSetError):
    def __str__(self):
        return 'tree is empty'

class InvalidReferenceError(RBSetError):
    def __str__(self):
        return "node does not belong to this tree: " + ''.join(map(str, self.args))

class TreeDestroyedError(InvalidReferenceError):
    def __str__(self):
        return 'tree has been destroyed'

class CapacityError(RBSetError):
    def __init__(self, capacity, needed):
        super(CapacityError, self).__init__(capacity, needed)
        self.capacity = capacity
        self.needed = needed

    def __str__(self):
        return ('buffer too small: capacity ' + str(self.capacity) +
                ', tree holds ' + str(self.needed) + ' keys')

class InvariantError(RBSetError):
    pass

class ParseError(RBSetError):
    pass

class FileParseError(RBSetError):
    def __init__(self, filename, line, msg):
        super(FileParseError, self).__init__(filename, line, msg)
        self.filename = filename
        self.line = line
        self.msg = msg
    def __str__(self):
        return self.filename + ':' + str(self.line) + ": " + str(self.msg)

