# -*- coding: utf-8 -*-
"""CLI runner for snesbrr."""
import argparse
import logging
import sys

from snesbrr.config import PlaybackConfig, parse_number
from snesbrr.exceptions import BRRException
from snesbrr.interface import print_blocks
from snesbrr.player import Player
from snesbrr.wav import write_wav

LOGGER = logging.getLogger('sbrr')


def build_parser():
    parser = argparse.ArgumentParser(
        description='Decode SNES BRR samples and play them through an '
                    'S-DSP envelope.')

    parser.add_argument('path', help="path to the ROM or BRR dump")
    parser.add_argument('offset', help="offset of the sample (hex with 0x)")
    parser.add_argument('-a', '--adsr',
                        help="both ADSR bytes, EDDDAAAA LLLRRRRR; takes "
                             "precedence over --gain")
    parser.add_argument('-g', '--gain',
                        help="GAIN byte, 0DDDDDDD (direct) or 1MMRRRRR "
                             "(custom)")
    parser.add_argument('-e', '--end',
                        help="end the sample before this block index")
    parser.add_argument('-l', '--loop', help="loop block index")
    parser.add_argument('-r', '--sample-rate', default='32000',
                        help="output sample rate (changes speed and pitch)")
    parser.add_argument('-o', '--out',
                        help="write the decoded samples to this WAV file")
    parser.add_argument('-p', '--play', action='store_true',
                        help="play aloud with the envelope and loop point")
    parser.add_argument('--print', action='store_true', dest='print_blocks',
                        help="print compressed blocks and decoded samples")
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def optional_number(text, name):
    if text is None:
        return None
    return parse_number(text, name)


def resolve_config(args) -> PlaybackConfig:
    """Turn parsed arguments into a validated playback config."""
    return PlaybackConfig(
        offset=parse_number(args.offset, 'OFFSET'),
        adsr=optional_number(args.adsr, 'ADSR'),
        gain=optional_number(args.gain, 'GAIN'),
        end_block=optional_number(args.end, 'END BLOCK'),
        loop_block=optional_number(args.loop, 'LOOP BLOCK'),
        sample_rate=parse_number(args.sample_rate, 'SAMPLE RATE'),
    ).validate()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig()
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = resolve_config(args)
        if not (args.out or args.play or args.print_blocks):
            parser.print_usage()
            return 0
        player = Player.from_file(args.path, config)
        if args.out:
            write_wav(args.out, player.decoded_samples(), config.sample_rate)
            LOGGER.info(f'Wrote {args.out}')
        if args.print_blocks:
            print_blocks(player.blocks, player.decoded_samples())
        if args.play:
            player.play()
    except (BRRException, OSError) as e:
        LOGGER.critical(e)
        return 1
    except KeyboardInterrupt:
        LOGGER.info('Stopped.')
    return 0


if __name__ == "__main__":
    sys.exit(main())
