"""Elder entities: principles, gravitational fields, mentor coordination and controllers."""