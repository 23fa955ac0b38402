""" A minimal module run in a forked child: the child reports a few records
    and a keepalive back to the main process, which prints what it receives.
"""

import openac
import os


class Ping(openac.Module):

    slots = {'sent': openac.attributes.SEQUENCE}

    def process(self):

        for number in range(3):
            self.push_sent(number)
            self.put_record([self['name'], number])

        self.put_keepalive()


def main():

    openac.api.install()
    openac.config.apply(Ping)

    address = openac.channel.ipc_address('ping-%d' % (os.getpid()))
    main_end = openac.Channel().bind(address)

    instance = Ping.instantiate({'name': 'ping'})
    pid = os.fork()

    if pid == 0:
        child_end = openac.Channel().connect(address)
        instance.assign(openac.Child(child_end))
        instance.daemonize()
        instance.process()
        child_end.close()
        os._exit(0)

    instance.assign(openac.Main(main_end))
    timeout, attempts = instance.lifecycle('process')

    while True:
        message = instance.receive(timeout=timeout)

        if message is None or instance.is_keepalive(message):
            break

        if instance.classify(message) == openac.protocol.RECORD:
            print('record: ' + repr(openac.protocol.payload(message)))

    os.waitpid(pid, 0)
    main_end.close()


if __name__ == '__main__':
    main()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
